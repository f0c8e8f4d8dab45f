"""Conversation logic for the finance assistant.

Responsibilities:
    - Configuration loading from the environment
    - Completion API access with explicit success/failure outcomes
    - Conversation history and loading state
    - Transcript building with a topic-specific system instruction

Maintains clean separation from the UI layer.
"""

from finance_guru.agent.completion import (
    CompletionClient,
    CompletionOutcome,
    Failure,
    FailureKind,
    Success,
    get_completion_client,
)
from finance_guru.agent.config import ChatConfig, get_chat_config
from finance_guru.agent.conversation import (
    ConversationController,
    build_request_messages,
    reply_for,
    system_instruction,
)

__all__ = [
    "ChatConfig",
    "CompletionClient",
    "CompletionOutcome",
    "ConversationController",
    "Failure",
    "FailureKind",
    "Success",
    "build_request_messages",
    "get_chat_config",
    "get_completion_client",
    "reply_for",
    "system_instruction",
]

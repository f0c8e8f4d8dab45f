"""Pydantic models for the conversation and the upstream transcript.

Models:
    - Message: A displayed chat message (user or bot)
    - ChatMessage: Role-tagged entry sent to the completion API
    - ConversationState: Snapshot of history plus loading flag
"""

from finance_guru.models.schemas import (
    ChatMessage,
    ChatRole,
    ConversationState,
    Message,
    Sender,
)

__all__ = ["ChatMessage", "ChatRole", "ConversationState", "Message", "Sender"]

"""Conversation state and request orchestration.

The ConversationController owns the message history for one chat
session, builds the transcript sent upstream, and turns every completion
outcome into exactly one bot message.

Design notes:

1. **Explicit ownership** - There is no global controller. The UI page
   creates one per browser client and passes it around.

2. **Outcome mapping** - The completion client returns a
   ``Success``/``Failure`` outcome, mapped to reply text through
   ``reply_for`` and the ``FALLBACK_REPLIES`` table. An exception from an
   injected client is treated as an upstream failure.

3. **Stale replies** - ``reset_chat`` bumps a generation counter. A reply
   that arrives for an older generation is dropped instead of being
   appended to the cleared conversation.
"""

import logging
from collections.abc import Sequence

from finance_guru.agent.completion import (
    CompletionClient,
    CompletionOutcome,
    Failure,
    FailureKind,
    Success,
    get_completion_client,
)
from finance_guru.agent.config import DEFAULT_TOPIC
from finance_guru.models.schemas import (
    ChatMessage,
    ChatRole,
    ConversationState,
    Message,
    Sender,
)

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION_TEMPLATE = (
    "You are a helpful financial assistant specializing in {topic}. "
    "Provide concise and accurate information. "
    "Format your responses using markdown for better readability."
)

NO_CONTENT_REPLY = "Sorry, I couldn't generate a response."
PROCESSING_ERROR_REPLY = "Sorry, I couldn't process your request."

FALLBACK_REPLIES: dict[FailureKind, str] = {
    FailureKind.MISSING_CREDENTIAL: PROCESSING_ERROR_REPLY,
    FailureKind.UPSTREAM_FAILURE: PROCESSING_ERROR_REPLY,
}


def system_instruction(topic: str | None = None, default_topic: str = DEFAULT_TOPIC) -> str:
    """Build the system instruction for a topic.

    Args:
        topic: Selected topic. None or empty falls back to default_topic.
        default_topic: Topic used when none is selected.

    Returns:
        The system instruction text.
    """
    return SYSTEM_INSTRUCTION_TEMPLATE.format(topic=topic or default_topic)


def build_request_messages(
    history: Sequence[Message],
    text: str,
    topic: str | None = None,
    default_topic: str = DEFAULT_TOPIC,
) -> list[ChatMessage]:
    """Build the transcript sent to the completion API.

    Args:
        history: Conversation before the new user message.
        text: The new user message.
        topic: Selected topic for the system instruction.
        default_topic: Topic used when none is selected.

    Returns:
        System instruction, then prior history, then the new user text.
    """
    messages = [
        ChatMessage(
            role=ChatRole.SYSTEM,
            content=system_instruction(topic, default_topic),
        )
    ]
    messages.extend(message.to_chat_message() for message in history)
    messages.append(ChatMessage(role=ChatRole.USER, content=text))
    return messages


def reply_for(outcome: CompletionOutcome) -> str:
    """Map a completion outcome to the bot reply shown to the user."""
    if isinstance(outcome, Success):
        return outcome.content or NO_CONTENT_REPLY
    return FALLBACK_REPLIES[outcome.kind]


class ConversationController:
    """Conversation history and request orchestration for one chat session.

    Only one request is expected in flight at a time. Nothing enforces
    this; the UI disables sending while ``is_loading`` is true.
    """

    def __init__(self, completion_client: CompletionClient | None = None) -> None:
        """Initialize an empty conversation.

        Args:
            completion_client: Client used to fetch replies.
                               Uses the shared client if not provided.
        """
        self._client = completion_client or get_completion_client()
        self._messages: list[Message] = []
        self._pending = 0
        self._generation = 0

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    @property
    def state(self) -> ConversationState:
        return ConversationState(messages=self.messages, is_loading=self.is_loading)

    async def send_message(self, text: str, topic: str | None = None) -> None:
        """Append a user message and fetch the bot reply.

        Blank text is ignored. Otherwise the conversation gains the user
        message immediately and one bot message once the request settles,
        whatever its outcome. Errors are logged, never raised.

        Args:
            text: The user's message.
            topic: Optional topic for this turn.
        """
        if not text.strip():
            return

        default_topic = self._client.config.default_topic
        request_messages = build_request_messages(
            self._messages, text, topic, default_topic
        )
        generation = self._generation

        self._messages.append(Message(text=text, sender=Sender.USER, topic=topic))
        self._pending += 1
        logger.info(f"Sending message ({len(text)} chars, topic={topic or default_topic!r})")

        try:
            try:
                outcome = await self._client.complete(request_messages)
            except Exception as e:
                logger.exception(f"Completion client raised: {e}")
                outcome = Failure(kind=FailureKind.UPSTREAM_FAILURE, detail=str(e))
            if generation != self._generation:
                logger.warning("Discarding reply for a conversation that was reset")
                return
            self._messages.append(
                Message(text=reply_for(outcome), sender=Sender.BOT, topic=topic)
            )
        finally:
            self._pending -= 1

    def reset_chat(self) -> None:
        """Clear the conversation history."""
        self._messages.clear()
        self._generation += 1
        logger.info("Conversation reset")

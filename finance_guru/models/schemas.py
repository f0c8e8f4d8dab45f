from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who authored a message in the conversation."""

    USER = "user"
    BOT = "bot"


class ChatRole(str, Enum):
    """Role tags understood by the completion API."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single entry of the transcript sent upstream.

    Attributes:
        role: The speaker role (system, user, or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: ChatRole
    content: str


class Message(BaseModel):
    """A message displayed in the conversation.

    Messages are immutable once created and have no identity beyond
    their position in the conversation.

    Attributes:
        text: The message text.
        sender: Whether the user or the bot wrote it.
        topic: Optional topic label the turn was sent under.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender
    topic: str | None = None

    def to_chat_message(self) -> ChatMessage:
        """Translate to the role-tagged form used in the upstream transcript."""
        role = ChatRole.USER if self.sender == Sender.USER else ChatRole.ASSISTANT
        return ChatMessage(role=role, content=self.text)


class ConversationState(BaseModel):
    """Snapshot of a conversation.

    Attributes:
        messages: Messages in display order.
        is_loading: Whether a reply is still being fetched.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = Field(default_factory=tuple)
    is_loading: bool = False

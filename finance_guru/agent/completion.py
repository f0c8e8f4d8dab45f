"""Completion API client returning explicit outcomes.

Wraps the OpenAI SDK so the rest of the app never sees an exception
from the upstream call. Every call resolves to one of two outcomes:

- ``Success``: the API answered; ``content`` is the first choice's text,
  or None when the response carried no usable content.
- ``Failure``: the call could not be completed. ``kind`` tells a missing
  credential apart from any other upstream problem, for logging only.

SDK retries are disabled. A failed request is reported once and never
repeated automatically.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict

from finance_guru.agent.config import ChatConfig, get_chat_config
from finance_guru.models.schemas import ChatMessage

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    """Diagnostic categories for a failed completion."""

    MISSING_CREDENTIAL = "missing_credential"
    UPSTREAM_FAILURE = "upstream_failure"


class Success(BaseModel):
    """The completion API answered."""

    model_config = ConfigDict(frozen=True)

    content: str | None = None


class Failure(BaseModel):
    """The completion could not be obtained.

    Attributes:
        kind: Which category of failure occurred.
        detail: Human-readable description for the log.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    detail: str = ""


CompletionOutcome = Success | Failure


class MalformedResponseError(Exception):
    """Raised when a completion response does not have the expected shape."""

    pass


def _first_choice_content(completion: Any) -> str | None:
    """Extract ``choices[0].message.content`` from a completion response.

    Missing choices, message, or content yield None. A response without a
    choices list at all is malformed.

    Raises:
        MalformedResponseError: If the response shape is not recognized.
    """
    choices = getattr(completion, "choices", None)
    if not isinstance(choices, list):
        raise MalformedResponseError("Response has no choices list")
    if not choices:
        return None

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if content is not None and not isinstance(content, str):
        raise MalformedResponseError(
            f"Expected string content, got {type(content).__name__}"
        )
    return content


class CompletionClient:
    """Adapter for the OpenAI chat completions endpoint."""

    def __init__(
        self,
        config: ChatConfig | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the completion client.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            client: Optional pre-built SDK client. Created lazily from
                    config when omitted.
        """
        self._config = config or get_chat_config()
        self._client = client

    @property
    def config(self) -> ChatConfig:
        return self._config

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                timeout=self._config.request_timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, messages: Sequence[ChatMessage]) -> CompletionOutcome:
        """Request a completion for a role-tagged transcript.

        Never raises. Failures are logged and returned as ``Failure``.

        Args:
            messages: The transcript, system instruction first.

        Returns:
            Success with the first choice's content, or Failure.
        """
        if not self._config.has_credential:
            logger.error("Error fetching response: LLM API key is not set")
            return Failure(
                kind=FailureKind.MISSING_CREDENTIAL,
                detail="LLM API key is not set",
            )

        try:
            completion = await self._get_client().chat.completions.create(
                model=self._config.model_name,
                messages=[message.model_dump() for message in messages],
            )
            content = _first_choice_content(completion)
        except Exception as e:
            logger.exception(f"Error fetching response: {e}")
            return Failure(kind=FailureKind.UPSTREAM_FAILURE, detail=str(e))

        logger.debug(
            f"Completion received from {self._config.model_name} "
            f"({len(content or '')} chars)"
        )
        return Success(content=content)


# Module-level shared client; holds no conversation state
_completion_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """Get or create the shared completion client.

    Returns:
        The CompletionClient instance.
    """
    global _completion_client
    if _completion_client is None:
        _completion_client = CompletionClient()
    return _completion_client

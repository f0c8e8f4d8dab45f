"""Chat configuration with environment variable loading.

Pydantic-based configuration for the completion client.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_TOPIC = "general finance"


def _api_key_from_env() -> str | None:
    return os.getenv("LLM_API_KEY") or os.getenv("OPENAI_API_KEY") or None


class ChatConfig(BaseModel):
    """Configuration for the finance chat assistant.

    A missing API key is not a configuration error: the app still starts
    and every send fails with a missing-credential reply until one is set.

    Attributes:
        api_key: API key for model access, or None when not configured.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        request_timeout: Seconds to wait for a completion before giving up.
        default_topic: Topic used in the system instruction when none is chosen.
    """

    api_key: str | None = Field(
        default_factory=_api_key_from_env,
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o"),
        min_length=1,
        description="Model to use",
    )
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("LLM_TIMEOUT", "60"),
        validate_default=True,
        gt=0.0,
        description="Request timeout in seconds",
    )
    default_topic: str = Field(
        default=DEFAULT_TOPIC,
        min_length=1,
        description="Topic for the system instruction when none is selected",
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str | None) -> str | None:
        """Strip the API key and treat blank values as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    return ChatConfig()

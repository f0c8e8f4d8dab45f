"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Config with a test API key
    - fake_completion_client: Completion client returning canned outcomes
    - mock_openai: Builds a CompletionClient backed by an httpx mock transport
    - async_client: HTTPX client for API testing
"""

import asyncio
import json
from collections.abc import AsyncGenerator, Callable, Sequence
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from openai import AsyncOpenAI

from finance_guru.agent.completion import CompletionClient, CompletionOutcome, Success
from finance_guru.agent.config import ChatConfig
from finance_guru.api.app import create_app
from finance_guru.models.schemas import ChatMessage

TEST_API_KEY = "sk-test-key-12345"


def completion_body(content: str | None = "A bond is a loan to an issuer.") -> dict[str, Any]:
    """Return a chat completion response body with a single choice."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class FakeCompletionClient(CompletionClient):
    """Completion client that records transcripts and returns a fixed outcome.

    When ``gate`` is set, each call waits on it before answering so tests
    can observe the in-flight state.
    """

    def __init__(
        self,
        outcome: CompletionOutcome,
        config: ChatConfig | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        super().__init__(config=config or ChatConfig(api_key=TEST_API_KEY))
        self.outcome = outcome
        self.gate = gate
        self.calls: list[list[ChatMessage]] = []

    async def complete(self, messages: Sequence[ChatMessage]) -> CompletionOutcome:
        self.calls.append(list(messages))
        if self.gate is not None:
            await self.gate.wait()
        return self.outcome


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return a config with a test API key and default model."""
    return ChatConfig(api_key=TEST_API_KEY, model_name="gpt-4o")


@pytest.fixture
def fake_completion_client(chat_config: ChatConfig) -> FakeCompletionClient:
    """Return a fake client answering with a fixed reply."""
    return FakeCompletionClient(
        Success(content="A bond is a loan to an issuer."), config=chat_config
    )


@pytest.fixture
def mock_openai(
    chat_config: ChatConfig,
) -> Callable[..., tuple[CompletionClient, list[httpx.Request]]]:
    """Build a CompletionClient whose HTTP traffic goes to a handler.

    Returns:
        Factory taking a handler (request -> response) and an optional config,
        returning the client and the list of captured requests.
    """

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        config: ChatConfig | None = None,
    ) -> tuple[CompletionClient, list[httpx.Request]]:
        config = config or chat_config
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        sdk_client = AsyncOpenAI(
            api_key=config.api_key or "unused",
            base_url="https://llm.test/v1",
            max_retries=0,
            http_client=httpx.AsyncClient(
                transport=httpx.MockTransport(recording_handler)
            ),
        )
        return CompletionClient(config=config, client=sdk_client), requests

    return factory


def request_json(request: httpx.Request) -> dict[str, Any]:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

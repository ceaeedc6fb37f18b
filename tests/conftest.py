"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from chatql.llm import ChatCompletion, ChatMessage, CompletionResult, UsageInfo


class FakeLLMClient:
    """Records chat_completion calls and returns a canned result."""

    def __init__(self, result: CompletionResult) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []

    async def chat_completion(
        self,
        payload: dict[str, Any],
        api_key: str,
        api_base: str | None = None,
    ) -> CompletionResult:
        self.calls.append({"payload": payload, "api_key": api_key, "api_base": api_base})
        return self.result

    @property
    def last_payload(self) -> dict[str, Any]:
        return self.calls[-1]["payload"]


@pytest.fixture
def upstream_response() -> dict[str, Any]:
    """Raw chat-completion response as the upstream returns it."""
    return {
        "id": "chatcmpl-abc123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo-0125",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello! How can I help?"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 8, "total_tokens": 20},
    }


@pytest.fixture
def completion() -> ChatCompletion:
    """Parsed completion."""
    return ChatCompletion(
        id="chatcmpl-abc123",
        object="chat.completion",
        created=1700000000,
        model="gpt-3.5-turbo-0125",
        message=ChatMessage(role="assistant", content="Hello! How can I help?"),
        usage=UsageInfo(prompt_tokens=12, completion_tokens=8, total_tokens=20),
    )


@pytest.fixture
def fake_client(completion: ChatCompletion) -> FakeLLMClient:
    """Fake upstream client returning a successful completion."""
    return FakeLLMClient(completion)


@pytest.fixture
def sample_messages() -> list[ChatMessage]:
    """Two-message conversation."""
    return [
        ChatMessage(role="system", content="You are helpful."),
        ChatMessage(role="user", content="Hello!"),
    ]


@pytest.fixture
def make_fake_client() -> type[FakeLLMClient]:
    """Factory for fake clients with a custom result."""
    return FakeLLMClient

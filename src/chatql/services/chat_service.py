"""Chat completion service."""

from collections.abc import Sequence
from typing import Any, Protocol

import structlog

from chatql.llm import (
    ChatCompletion,
    ChatMessage,
    ChatParameters,
    CompletionResult,
    FailureKind,
    UpstreamFailure,
    build_completion_payload,
)

from .exceptions import ConfigurationError, UpstreamAPIError, UpstreamTransportError

logger = structlog.get_logger()


class ChatCompletionClient(Protocol):
    """Anything that can run one chat completion."""

    async def chat_completion(
        self,
        payload: dict[str, Any],
        api_key: str,
        api_base: str | None = None,
    ) -> CompletionResult: ...


class ChatService:
    """Runs a chat request against the upstream with a bound credential."""

    def __init__(
        self,
        client: ChatCompletionClient,
        api_key: str | None,
        api_base: str | None = None,
    ) -> None:
        """Initialize chat service.

        Args:
            client: Upstream chat-completion client
            api_key: Upstream credential, None when not configured
            api_base: Optional alternative upstream endpoint
        """
        self._client = client
        self._api_key = api_key
        self._api_base = api_base

    async def chat(
        self,
        messages: Sequence[ChatMessage],
        params: ChatParameters,
    ) -> ChatCompletion:
        """Send a conversation upstream and return the first choice.

        Args:
            messages: Conversation in order
            params: Sampling parameters

        Returns:
            Completion for the first choice

        Raises:
            ConfigurationError: If no credential is configured
            UpstreamAPIError: If the upstream rejected the request
            UpstreamTransportError: If the call failed for any other reason
        """
        if not self._api_key:
            logger.warning("chat_rejected_missing_api_key")
            raise ConfigurationError()

        payload = build_completion_payload(messages, params)
        result = await self._client.chat_completion(
            payload,
            api_key=self._api_key,
            api_base=self._api_base,
        )

        if isinstance(result, UpstreamFailure):
            if result.kind is FailureKind.API:
                raise UpstreamAPIError(result.message)
            raise UpstreamTransportError(result.message)

        return result

"""OpenAI chat-completion client.

Single-shot async wrapper around the OpenAI SDK that reports failures as
values. The raw upstream body is mapped directly so that fields the
upstream left out (usage) stay absent.
"""

from typing import Any

import httpx
import openai
import structlog
from pydantic import ValidationError

from .schemas import (
    ChatCompletion,
    ChatMessage,
    CompletionResult,
    FailureKind,
    UpstreamFailure,
    UsageInfo,
)

logger = structlog.get_logger()


def upstream_error_message(exc: openai.APIError) -> str:
    """Extract the upstream's own error message.

    Args:
        exc: OpenAI SDK error

    Returns:
        error.message from the upstream body when present, else the SDK message
    """
    body = exc.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return exc.message


def parse_completion(data: Any) -> ChatCompletion:
    """Map a raw chat-completion body to a ChatCompletion.

    Args:
        data: Decoded JSON body returned by the upstream

    Returns:
        Parsed completion built from the first choice

    Raises:
        KeyError, IndexError, TypeError, ValidationError: If the body
            does not have the expected shape
    """
    choice = data["choices"][0]
    usage = data.get("usage")

    return ChatCompletion(
        id=data["id"],
        object=data["object"],
        created=data["created"],
        model=data["model"],
        message=ChatMessage(
            role=choice["message"]["role"],
            content=choice["message"]["content"],
        ),
        usage=(
            UsageInfo(
                prompt_tokens=usage["prompt_tokens"],
                completion_tokens=usage["completion_tokens"],
                total_tokens=usage["total_tokens"],
            )
            if usage is not None
            else None
        ),
    )


class OpenAIChatClient:
    """Async OpenAI chat client without retries."""

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the client.

        Args:
            http_client: Shared HTTP client, defaults to the SDK's own settings
        """
        self._http_client = http_client or openai.DefaultAsyncHttpxClient()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.aclose()

    async def chat_completion(
        self,
        payload: dict[str, Any],
        api_key: str,
        api_base: str | None = None,
    ) -> CompletionResult:
        """Call the chat-completion API once.

        Args:
            payload: Request body from build_completion_payload
            api_key: Upstream credential
            api_base: Optional alternative endpoint

        Returns:
            ChatCompletion on success, UpstreamFailure otherwise
        """
        logger.info(
            "llm_chat_completion_start",
            model=payload.get("model"),
            message_count=len(payload.get("messages", [])),
            temperature=payload.get("temperature"),
        )

        client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=api_base,
            max_retries=0,
            http_client=self._http_client,
        )

        try:
            raw = await client.chat.completions.with_raw_response.create(**payload)
        except openai.APIStatusError as e:
            # The upstream answered with an error body
            return self._failure(FailureKind.API, e, upstream_error_message(e))
        except openai.APIConnectionError as e:
            return self._failure(FailureKind.TRANSPORT, e, e.message)
        except Exception as e:
            return self._failure(FailureKind.TRANSPORT, e, str(e) or type(e).__name__)

        try:
            completion = parse_completion(raw.http_response.json())
        except (ValueError, KeyError, IndexError, TypeError, ValidationError) as e:
            return self._failure(FailureKind.TRANSPORT, e, f"Unexpected response shape: {e}")

        logger.info(
            "llm_chat_completion_success",
            model=completion.model,
            completion_id=completion.id,
            total_tokens=completion.usage.total_tokens if completion.usage else None,
        )

        return completion

    @staticmethod
    def _failure(kind: FailureKind, exc: Exception, message: str) -> UpstreamFailure:
        failure = UpstreamFailure(kind=kind, message=message)
        logger.warning(
            "llm_chat_completion_failed",
            kind=kind.value,
            error_type=type(exc).__name__,
            error=failure.message,
        )
        return failure

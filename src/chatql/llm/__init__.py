"""Upstream chat-completion layer."""

from .client import OpenAIChatClient, parse_completion, upstream_error_message
from .payload import build_completion_payload, differs_from_default
from .schemas import (
    ChatCompletion,
    ChatMessage,
    ChatParameters,
    CompletionResult,
    FailureKind,
    UpstreamFailure,
    UsageInfo,
)

__all__ = [
    # Client
    "OpenAIChatClient",
    "parse_completion",
    "upstream_error_message",
    # Payload
    "build_completion_payload",
    "differs_from_default",
    # Schemas
    "ChatCompletion",
    "ChatMessage",
    "ChatParameters",
    "CompletionResult",
    "FailureKind",
    "UpstreamFailure",
    "UsageInfo",
]

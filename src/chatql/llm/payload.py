"""Upstream request payload construction."""

from collections.abc import Sequence
from typing import Any

from .schemas import (
    DEFAULT_FREQUENCY_PENALTY,
    DEFAULT_PRESENCE_PENALTY,
    DEFAULT_TOP_P,
    ChatMessage,
    ChatParameters,
)

# Sent only when the caller moves them off their default.
OPTIONAL_PARAMETER_DEFAULTS: dict[str, float] = {
    "top_p": DEFAULT_TOP_P,
    "frequency_penalty": DEFAULT_FREQUENCY_PENALTY,
    "presence_penalty": DEFAULT_PRESENCE_PENALTY,
}


def differs_from_default(value: float | None, default: float) -> bool:
    """Check whether an optional parameter belongs in the payload.

    Args:
        value: Supplied parameter value, None when not supplied
        default: Declared default for the parameter

    Returns:
        True if the value was supplied and is not the default
    """
    return value is not None and value != default


def build_completion_payload(
    messages: Sequence[ChatMessage],
    params: ChatParameters,
) -> dict[str, Any]:
    """Build the chat-completion request body.

    model, messages, temperature and max_tokens are always present.
    top_p, frequency_penalty and presence_penalty are omitted while
    they hold their default value.

    Args:
        messages: Conversation in order
        params: Sampling parameters

    Returns:
        Request payload dict
    """
    payload: dict[str, Any] = {
        "model": params.model,
        "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
        "temperature": params.temperature,
        "max_tokens": params.max_tokens,
    }

    for name, default in OPTIONAL_PARAMETER_DEFAULTS.items():
        value = getattr(params, name)
        if differs_from_default(value, default):
            payload[name] = value

    return payload

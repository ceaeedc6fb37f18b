"""Business logic services."""

from .chat_service import ChatCompletionClient, ChatService
from .exceptions import (
    ChatServiceError,
    ConfigurationError,
    UpstreamAPIError,
    UpstreamTransportError,
)

__all__ = [
    "ChatCompletionClient",
    "ChatService",
    "ChatServiceError",
    "ConfigurationError",
    "UpstreamAPIError",
    "UpstreamTransportError",
]

"""Chat service errors.

Each error carries the final, client-facing message. Raised inside a
resolver they become entries of the GraphQL errors array.
"""


class ChatServiceError(Exception):
    """Base exception for chat service failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ChatServiceError):
    """Upstream credential is not configured."""

    def __init__(self, message: str = "OpenAI API key is not configured") -> None:
        super().__init__(message)


class UpstreamAPIError(ChatServiceError):
    """Upstream returned a structured API error."""

    def __init__(self, upstream_message: str) -> None:
        super().__init__(f"OpenAI API Error: {upstream_message}")
        self.upstream_message = upstream_message


class UpstreamTransportError(ChatServiceError):
    """Upstream call failed for any other reason (network, bad response)."""

    def __init__(self, upstream_message: str) -> None:
        super().__init__(f"Failed to call OpenAI API: {upstream_message}")
        self.upstream_message = upstream_message

"""Custom exceptions for API layer."""


class APIError(Exception):
    """Base exception for API errors rendered as a GraphQL-style envelope."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
    ) -> None:
        """Initialize API error.

        Args:
            message: Error message returned to the client
            code: Error code for logs
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class RequestParseError(APIError):
    """Request body could not be parsed or executed by the GraphQL engine."""

    def __init__(self, message: str) -> None:
        """Initialize request parse error.

        Args:
            message: Parse or engine failure description
        """
        super().__init__(
            message=message,
            code="REQUEST_PARSE_ERROR",
            status_code=400,
        )

"""Global exception handlers for FastAPI."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .exceptions import APIError
from .middleware import CORS_HEADERS
from .schemas import ErrorResponse

logger = structlog.get_logger()


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(APIError)
    async def api_error_handler(
        request: Request,
        exc: APIError,
    ) -> JSONResponse:
        """Render API errors as an errors envelope.

        Args:
            request: Request instance
            exc: APIError exception

        Returns:
            JSON error response
        """
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            "graphql_request_rejected",
            request_id=request_id,
            code=exc.code,
            message=exc.message,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.from_message(exc.message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        request_id = getattr(request.state, "request_id", "unknown")

        logger.exception(
            "unhandled_error",
            request_id=request_id,
            error_type=type(exc).__name__,
            error=str(exc),
        )

        # Bypasses the CORS middleware, so the headers are set here
        # Internal details stay in the logs
        return JSONResponse(
            status_code=500,
            content=ErrorResponse.from_message("Internal server error").model_dump(),
            headers=CORS_HEADERS,
        )

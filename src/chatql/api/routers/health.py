"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def health_check(request: Request) -> JSONResponse:
    """Check API health status.

    Answers every method; OPTIONS never reaches here.

    Returns:
        Health status response
    """
    return JSONResponse(HealthResponse(status="ok", timestamp=utc_timestamp()).model_dump())


# Plain route without a method filter
router.add_route("/health", health_check, methods=None, include_in_schema=False)

"""Fallback route listing the available endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..schemas import ServiceIndexResponse

router = APIRouter(tags=["index"])


async def service_index(request: Request) -> JSONResponse:
    """Describe the service for any unmatched path and method."""
    return JSONResponse(ServiceIndexResponse().model_dump())


router.add_route("/{path:path}", service_index, methods=None, include_in_schema=False)

"""API routers for endpoint organization."""

from .graphql import router as graphql_router
from .health import router as health_router
from .index import router as index_router

__all__ = [
    "graphql_router",
    "health_router",
    "index_router",
]

"""HTTP API for the GraphQL gateway."""

from .main import app, create_app

__all__ = ["app", "create_app"]

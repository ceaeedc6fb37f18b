"""HTTP request/response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequest(BaseModel):
    """POST /graphql body."""

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")

    model_config = ConfigDict(populate_by_name=True)


class ErrorEntry(BaseModel):
    """Single error in an errors envelope."""

    message: str


class ErrorResponse(BaseModel):
    """Errors envelope for requests rejected before execution."""

    errors: list[ErrorEntry]

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        return cls(errors=[ErrorEntry(message=message)])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str


class ServiceIndexResponse(BaseModel):
    """Available endpoints."""

    message: str = "GraphQL OpenAI Service"
    endpoints: dict[str, str] = Field(
        default_factory=lambda: {"graphql": "/graphql", "health": "/health"}
    )

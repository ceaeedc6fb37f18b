"""GraphQL endpoint."""

import json
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import ValidationError
from strawberry.types import ExecutionResult

from chatql.schema import schema

from ..dependencies import APIConfig, GraphQLContextDep
from ..exceptions import RequestParseError
from ..playground import render_playground
from ..schemas import GraphQLRequest, ServiceIndexResponse

logger = structlog.get_logger()

GRAPHQL_PATH = "/graphql"

router = APIRouter(tags=["graphql"])


async def parse_graphql_request(request: Request) -> GraphQLRequest:
    """Parse a POST /graphql body.

    Args:
        request: Incoming request

    Returns:
        Parsed GraphQL request

    Raises:
        RequestParseError: If the body is not JSON or lacks a query string
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestParseError(f"Invalid JSON body: {e}") from e

    try:
        return GraphQLRequest.model_validate(body)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(x) for x in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise RequestParseError(f"Invalid GraphQL request: {details}") from e


def format_result(result: ExecutionResult) -> dict[str, Any]:
    """Serialize an execution result to the GraphQL response envelope."""
    response: dict[str, Any] = {"data": result.data}
    if result.errors:
        response["errors"] = [error.formatted for error in result.errors]
    if result.extensions:
        response["extensions"] = result.extensions
    return response


@router.get(GRAPHQL_PATH, response_model=None)
async def graphql_playground(settings: APIConfig) -> Response:
    """Serve the GraphQL Playground page.

    Returns:
        Playground HTML, or the service index when the playground is off
    """
    if not settings.playground_enabled:
        return JSONResponse(ServiceIndexResponse().model_dump())
    return HTMLResponse(render_playground(GRAPHQL_PATH))


@router.post(GRAPHQL_PATH)
async def graphql_endpoint(
    request: Request,
    context: GraphQLContextDep,
) -> JSONResponse:
    """Execute a GraphQL operation.

    Resolver failures come back in the errors array with HTTP 200; only
    unparseable bodies and engine failures produce HTTP 400.

    Returns:
        GraphQL result envelope
    """
    body = await parse_graphql_request(request)

    logger.info(
        "graphql_request",
        operation_name=body.operation_name,
        has_variables=body.variables is not None,
    )

    try:
        result = await schema.execute(
            body.query,
            variable_values=body.variables,
            operation_name=body.operation_name,
            context_value=context,
        )
    except Exception as e:
        raise RequestParseError(str(e) or type(e).__name__) from e

    return JSONResponse(format_result(result))

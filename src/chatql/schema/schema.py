"""GraphQL schema definition.

The schema is built once at import and shared by every request.
"""

from typing import Any

import strawberry
import structlog
from graphql import GraphQLError
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from chatql.llm import ChatParameters
from chatql.llm.schemas import (
    DEFAULT_FREQUENCY_PENALTY,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_PRESENCE_PENALTY,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)

from .context import GraphQLContext
from .types import ChatResponse, MessageInput

logger = structlog.get_logger()

HEALTH_MESSAGE = "GraphQL OpenAI Service is running!"


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return HEALTH_MESSAGE


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def chat(
        self,
        info: Info[GraphQLContext, None],
        messages: list[MessageInput],
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        top_p: float = DEFAULT_TOP_P,
        frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY,
        presence_penalty: float = DEFAULT_PRESENCE_PENALTY,
    ) -> ChatResponse:
        """Run one chat completion.

        Service errors propagate and are reported in the errors array.
        """
        params = ChatParameters(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            top_p=top_p,
            frequency_penalty=frequency_penalty,
            presence_penalty=presence_penalty,
        )
        completion = await info.context.chat_service.chat(
            [msg.to_chat_message() for msg in messages],
            params,
        )
        return ChatResponse.from_completion(completion)


class ChatSchema(strawberry.Schema):
    """Schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Any = None,
    ) -> None:
        for error in errors:
            logger.warning(
                "graphql_resolver_error",
                error=error.message,
                path=error.path,
                error_type=type(error.original_error).__name__ if error.original_error else None,
            )


schema = ChatSchema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)

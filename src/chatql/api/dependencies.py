"""FastAPI dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from chatql.llm import OpenAIChatClient
from chatql.schema import GraphQLContext
from chatql.services import ChatService

from .config import APISettings, OpenAISettings, get_api_settings, get_openai_settings


@lru_cache
def get_llm_client() -> OpenAIChatClient:
    """Get the shared upstream client."""
    return OpenAIChatClient()


def get_chat_service(
    settings: Annotated[OpenAISettings, Depends(get_openai_settings)],
    client: Annotated[OpenAIChatClient, Depends(get_llm_client)],
) -> ChatService:
    """Chat service dependency.

    The credential is read from settings here, once per request.

    Args:
        settings: OpenAI settings from DI
        client: Upstream client from DI

    Returns:
        ChatService bound to the configured credential
    """
    return ChatService(
        client=client,
        api_key=settings.api_key,
        api_base=settings.api_base,
    )


def get_graphql_context(
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
) -> GraphQLContext:
    """GraphQL context dependency."""
    return GraphQLContext(chat_service=chat_service)


# Type aliases for cleaner route signatures
APIConfig = Annotated[APISettings, Depends(get_api_settings)]
GraphQLContextDep = Annotated[GraphQLContext, Depends(get_graphql_context)]

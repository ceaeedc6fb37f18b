"""GraphQL execution context."""

from dataclasses import dataclass

from chatql.services import ChatService


@dataclass(frozen=True)
class GraphQLContext:
    """Per-request dependencies handed to resolvers."""

    chat_service: ChatService

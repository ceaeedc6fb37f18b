"""GraphQL schema and resolvers."""

from .context import GraphQLContext
from .schema import HEALTH_MESSAGE, ChatSchema, schema
from .types import ChatResponse, Message, MessageInput, Usage

__all__ = [
    "HEALTH_MESSAGE",
    "ChatResponse",
    "ChatSchema",
    "GraphQLContext",
    "Message",
    "MessageInput",
    "Usage",
    "schema",
]

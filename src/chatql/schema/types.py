"""GraphQL object and input types."""

from __future__ import annotations

import strawberry

from chatql.llm import ChatCompletion, ChatMessage


@strawberry.type
class Message:
    role: str
    content: str


@strawberry.input
class MessageInput:
    role: str
    content: str

    def to_chat_message(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


@strawberry.type
class Usage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@strawberry.type
class ChatResponse:
    id: str
    object: str
    created: int
    model: str
    message: Message
    usage: Usage | None = None

    @classmethod
    def from_completion(cls, completion: ChatCompletion) -> ChatResponse:
        """Build the GraphQL response from an upstream completion.

        Args:
            completion: Parsed upstream completion

        Returns:
            ChatResponse with usage set to None when the upstream sent none
        """
        usage = completion.usage
        return cls(
            id=completion.id,
            object=completion.object,
            created=completion.created,
            model=completion.model,
            message=Message(
                role=completion.message.role,
                content=completion.message.content,
            ),
            usage=(
                Usage(
                    prompt_tokens=usage.prompt_tokens,
                    completion_tokens=usage.completion_tokens,
                    total_tokens=usage.total_tokens,
                )
                if usage is not None
                else None
            ),
        )

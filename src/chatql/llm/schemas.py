"""Chat completion request/response schemas.

Pydantic models for the upstream chat-completion exchange.
"""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TOP_P = 1.0
DEFAULT_FREQUENCY_PENALTY = 0.0
DEFAULT_PRESENCE_PENALTY = 0.0


class ChatMessage(BaseModel):
    """Individual chat message.

    Role is not restricted to system/user/assistant; the upstream decides.
    """

    role: str
    content: str


class ChatParameters(BaseModel):
    """Sampling parameters for a chat completion.

    No range checks: out-of-range values are left for the upstream to reject.
    """

    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    top_p: float = DEFAULT_TOP_P
    frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY
    presence_penalty: float = DEFAULT_PRESENCE_PENALTY


class UsageInfo(BaseModel):
    """Token usage information."""

    prompt_tokens: int = Field(ge=0)
    completion_tokens: int = Field(ge=0)
    total_tokens: int = Field(ge=0)


class ChatCompletion(BaseModel):
    """First choice of an upstream completion plus its envelope fields."""

    id: str
    object: str
    created: int
    model: str
    message: ChatMessage
    usage: UsageInfo | None = None


class FailureKind(str, Enum):
    """Upstream failure classification."""

    API = "api"
    TRANSPORT = "transport"


class UpstreamFailure(BaseModel):
    """Failed upstream call."""

    kind: FailureKind
    message: str


CompletionResult = ChatCompletion | UpstreamFailure

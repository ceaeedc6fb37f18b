"""API configuration settings.

Provides settings for the upstream credential, the HTTP surface and logging.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """Upstream chat-completion settings."""

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key (OPENAI_API_KEY)",
        repr=False,
    )
    api_base: str | None = Field(
        default=None,
        description="Alternative base URL for OpenAI-compatible gateways",
    )

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        extra="ignore",
    )


class APISettings(BaseSettings):
    """General API settings."""

    title: str = Field(
        default="ChatQL",
        description="API title",
    )
    description: str = Field(
        default="GraphQL gateway for OpenAI chat completions",
        description="API description",
    )
    version: str = Field(
        default="0.1.0",
        description="API version",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    playground_enabled: bool = Field(
        default=True,
        description="Serve the GraphQL Playground on GET /graphql",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Structured logging settings."""

    level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(
        default=True,
        alias="LOG_JSON",
        description="Render JSON lines instead of console output",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_openai_settings() -> OpenAISettings:
    """Get cached OpenAI settings."""
    return OpenAISettings()


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings."""
    return APISettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()

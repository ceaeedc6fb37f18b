"""ChatQL: GraphQL gateway for OpenAI chat completions."""

__version__ = "0.1.0"

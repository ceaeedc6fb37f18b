"""API test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chatql.api.config import OpenAISettings, get_openai_settings
from chatql.api.dependencies import get_llm_client


@pytest.fixture
def openai_settings() -> OpenAISettings:
    """Settings with a test credential."""
    return OpenAISettings(api_key="sk-test", _env_file=None)


@pytest.fixture
def app(fake_client: Any, openai_settings: OpenAISettings) -> FastAPI:
    """Create test FastAPI app with a fake upstream client."""
    from chatql.api.main import create_app

    app = create_app()
    app.dependency_overrides[get_openai_settings] = lambda: openai_settings
    app.dependency_overrides[get_llm_client] = lambda: fake_client

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def post_graphql(client: TestClient) -> Callable[..., Any]:
    """POST a GraphQL operation and return the response."""

    def _post(query: str, variables: dict[str, Any] | None = None, **extra: Any) -> Any:
        body: dict[str, Any] = {"query": query, "variables": variables, **extra}
        return client.post("/graphql", json=body)

    return _post

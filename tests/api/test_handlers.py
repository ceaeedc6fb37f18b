"""Exception handler tests."""

from __future__ import annotations

from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from chatql.api.exceptions import APIError, RequestParseError
from chatql.api.dependencies import get_chat_service
from chatql.api.handlers import register_exception_handlers
from chatql.api.middleware import CORS_HEADERS


def make_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/parse-error")
    async def parse_error() -> None:
        raise RequestParseError("Invalid JSON body")

    @app.get("/api-error")
    async def api_error() -> None:
        raise APIError(message="Payload too large", code="TOO_LARGE", status_code=413)

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    return app


class TestExceptionHandlers:
    """Tests for register_exception_handlers."""

    def test_request_parse_error(self) -> None:
        """RequestParseError renders a 400 errors envelope."""
        response = TestClient(make_app()).get("/parse-error")

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Invalid JSON body"}]}

    def test_api_error_status_code(self) -> None:
        """APIError keeps its own status code."""
        response = TestClient(make_app()).get("/api-error")

        assert response.status_code == 413
        assert response.json() == {"errors": [{"message": "Payload too large"}]}

    def test_api_error_logged(self) -> None:
        """Rejected requests are logged with their code."""
        with patch("chatql.api.handlers.logger") as mock_logger:
            TestClient(make_app()).get("/parse-error")

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["code"] == "REQUEST_PARSE_ERROR"

    def test_unhandled_exception_hides_details(self) -> None:
        """Unhandled errors become a generic 500."""
        client = TestClient(make_app(), raise_server_exceptions=False)

        with patch("chatql.api.handlers.logger") as mock_logger:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"errors": [{"message": "Internal server error"}]}
        assert "secret internals" not in response.text
        assert response.headers["access-control-allow-origin"] == "*"
        mock_logger.exception.assert_called_once()


class TestExceptions:
    """Tests for API exception types."""

    def test_request_parse_error_fields(self) -> None:
        """RequestParseError is a 400 with its own code."""
        error = RequestParseError("bad body")

        assert error.status_code == 400
        assert error.code == "REQUEST_PARSE_ERROR"
        assert error.message == "bad body"
        assert isinstance(error, APIError)


class TestUnhandledErrorsThroughApp:
    """Unhandled errors raised inside the full application."""

    def test_internal_error_carries_cors_headers(self, app: FastAPI) -> None:
        """A 500 from a failing dependency still has the CORS headers."""

        def broken_service() -> None:
            raise RuntimeError("service wiring failed")

        app.dependency_overrides[get_chat_service] = broken_service
        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/graphql", json={"query": "{ health }"})

        assert response.status_code == 500
        assert response.json() == {"errors": [{"message": "Internal server error"}]}
        for name, value in CORS_HEADERS.items():
            assert response.headers[name] == value

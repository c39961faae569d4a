"""
Unit tests for server exception handlers.

Tests cover the global handler's response body and logging, and its
registration on a FastAPI application.
"""

from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, HTTPException, Request
from httpx import ASGITransport, AsyncClient

from tabdeel_pulse.server.exception_handlers import setup_exception_handlers
from tabdeel_pulse.server.exception_handlers.global_handler import global_exception_handler


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.fixture
    def mock_request(self):
        request = Mock(spec=Request)
        request.method = "GET"
        request.url.path = "/api/users"
        request.query_params = {}
        request.client = Mock()
        request.client.host = "127.0.0.1"
        return request

    async def test_returns_500_with_error_details(self, mock_request):
        with patch("tabdeel_pulse.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, ValueError("boom"))

        assert response.status_code == 500
        body = response.body.decode()
        assert '"detail":"Internal server error"' in body
        assert '"error_type":"ValueError"' in body
        assert '"error_id"' in body

    async def test_logs_error_with_context(self, mock_request):
        with patch("tabdeel_pulse.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("db down"))

        mock_logger.error.assert_called_once()
        message = mock_logger.error.call_args[0][0]
        extra = mock_logger.error.call_args[1]["extra"]
        assert "Unhandled exception" in message
        assert "/api/users" in message
        assert extra["error_type"] == "RuntimeError"
        assert extra["client"] == "127.0.0.1"

    async def test_unknown_client(self, mock_request):
        mock_request.client = None
        with patch("tabdeel_pulse.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, KeyError("x"))
        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    async def test_error_ids_are_unique(self, mock_request):
        with patch("tabdeel_pulse.server.exception_handlers.global_handler.logger"):
            first = await global_exception_handler(mock_request, ValueError("a"))
            second = await global_exception_handler(mock_request, ValueError("a"))
        assert first.body != second.body


class TestSetupExceptionHandlers:
    async def test_unhandled_errors_become_500(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/explode")
        async def explode():
            raise RuntimeError("kaboom")

        @app.get("/missing")
        async def missing():
            raise HTTPException(status_code=404, detail="nope")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            exploded = await client.get("/explode")
            not_found = await client.get("/missing")

        assert exploded.status_code == 500
        assert exploded.json()["error_type"] == "RuntimeError"
        assert not_found.status_code == 404
        assert not_found.json() == {"detail": "nope"}

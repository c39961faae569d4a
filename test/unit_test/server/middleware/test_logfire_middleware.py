"""
Unit tests for the request timing middleware.

Covers successful and failing requests, the X-Process-Time header and slow
request warnings.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import Response

from tabdeel_pulse.server.middleware import SLOW_REQUEST_MS, LogfireMiddleware

MODULE = "tabdeel_pulse.server.middleware.logfire_middleware"


@pytest.fixture
def mock_request():
    request = AsyncMock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/tasks"
    request.state = MagicMock()
    return request


class TestDispatch:
    async def test_successful_request_is_logged(self, mock_request):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch(f"{MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        assert "X-Process-Time" in response.headers
        kwargs = mock_log.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/tasks"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0

    async def test_failure_is_logged_as_500_and_reraised(self, mock_request):
        async def call_next(request):
            raise ValueError("handler failed")

        middleware = LogfireMiddleware(app=AsyncMock())
        with patch(f"{MODULE}.log_api_request") as mock_log, patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(ValueError):
                await middleware.dispatch(mock_request, call_next)

        assert mock_log.call_args.kwargs["status_code"] == 500
        mock_logger.error.assert_called_once()

    async def test_slow_request_warning(self, mock_request):
        async def call_next(request):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())
        ticks = [0.0, (SLOW_REQUEST_MS + 500) / 1000]
        with (
            patch(f"{MODULE}.time.perf_counter", side_effect=lambda: ticks.pop(0) if len(ticks) > 1 else ticks[0]),
            patch(f"{MODULE}.log_api_request"),
            patch(f"{MODULE}.logger") as mock_logger,
        ):
            await middleware.dispatch(mock_request, call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]


async def test_middleware_on_real_app():
    app = FastAPI()
    app.add_middleware(LogfireMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    with patch(f"{MODULE}.log_api_request") as mock_log:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/ping")

    assert response.status_code == 200
    assert float(response.headers["X-Process-Time"]) >= 0
    assert mock_log.call_args.kwargs["path"] == "/ping"

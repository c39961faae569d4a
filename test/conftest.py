from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
# test/.env wins over the defaults in test/.env.example
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def _refuse_remote(request: httpx.Request) -> None:
    if request.url.host not in LOOPBACK_HOSTS:
        raise RuntimeError(f"Tests must stay offline; refused {request.method} {request.url}")


@pytest.fixture(autouse=True)
def _no_network(monkeypatch: pytest.MonkeyPatch):
    """Refuse real network traffic; in-process ``ASGITransport`` calls never reach a socket transport."""
    handle_sync = httpx.HTTPTransport.handle_request
    handle_async = httpx.AsyncHTTPTransport.handle_async_request

    def guarded_sync(self, request: httpx.Request) -> httpx.Response:
        _refuse_remote(request)
        return handle_sync(self, request)

    async def guarded_async(self, request: httpx.Request) -> httpx.Response:
        _refuse_remote(request)
        return await handle_async(self, request)

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", guarded_sync)
    monkeypatch.setattr(httpx.AsyncHTTPTransport, "handle_async_request", guarded_async)

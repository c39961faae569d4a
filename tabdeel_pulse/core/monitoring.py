"""
Monitoring and Tracing Configuration Module.

Optional Pydantic Logfire integration for the Tabdeel Pulse API. When
configured it traces FastAPI endpoints, SQLAlchemy queries, outbound HTTPX
calls and Pydantic AI summarisation runs; otherwise the ``log_*`` helpers
fall back to debug log lines.

Logfire stays off unless ``LOGFIRE_ENABLED`` is set and a token is available.
"""

import logging
import os
from typing import Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


LOGFIRE_ENABLED = _flag("LOGFIRE_ENABLED", "false")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "tabdeel-pulse-api")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

LOGFIRE_TRACE_PYDANTIC_AI = _flag("LOGFIRE_TRACE_PYDANTIC_AI", "true")
LOGFIRE_TRACE_SQLALCHEMY = _flag("LOGFIRE_TRACE_SQLALCHEMY", "true")
LOGFIRE_TRACE_HTTPX = _flag("LOGFIRE_TRACE_HTTPX", "true")
LOGFIRE_TRACE_FASTAPI = _flag("LOGFIRE_TRACE_FASTAPI", "true")

_configured = False


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Configure Logfire and switch on the enabled instrumentations.

    Args:
        app: Application to instrument; FastAPI tracing is skipped without one.

    Returns:
        True when Logfire was configured, False when monitoring stays disabled.
    """
    global _configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False
    if not LOGFIRE_TOKEN:
        logger.warning("LOGFIRE_ENABLED is set but LOGFIRE_TOKEN is empty; monitoring stays off.")
        return False

    logfire.configure(
        token=LOGFIRE_TOKEN,
        service_name=LOGFIRE_SERVICE_NAME,
        service_version=LOGFIRE_SERVICE_VERSION,
        environment=LOGFIRE_ENVIRONMENT,
    )
    _configured = True

    instrumentations = [
        ("Pydantic AI", LOGFIRE_TRACE_PYDANTIC_AI, logfire.instrument_pydantic_ai, {}),
        ("SQLAlchemy", LOGFIRE_TRACE_SQLALCHEMY, logfire.instrument_sqlalchemy, {}),
        ("HTTPX", LOGFIRE_TRACE_HTTPX, logfire.instrument_httpx, {}),
        ("FastAPI", LOGFIRE_TRACE_FASTAPI and app is not None, logfire.instrument_fastapi, {"app": app}),
    ]
    enabled = []
    for name, wanted, instrument, kwargs in instrumentations:
        if wanted:
            instrument(**kwargs)
            enabled.append(name)

    logger.info(
        f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, "
        f"service={LOGFIRE_SERVICE_NAME}, instrumented={', '.join(enabled) or 'nothing'}"
    )
    return True


def is_enabled() -> bool:
    """Whether Logfire has been configured in this process."""
    return _configured


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """Record one finished request (called by ``LogfireMiddleware``)."""
    if not is_enabled():
        logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_llm_call(model: str, thread_id: int, characters: int, tokens_used: Optional[int] = None) -> None:
    """
    Record a thread summarisation call.

    Args:
        model: Model name reported by the summarizer
        thread_id: Thread whose conversation was summarised
        characters: Length of the transcript sent to the model
        tokens_used: Total tokens reported by the model, when known
    """
    if not is_enabled():
        logger.debug(f"LLM call: model={model}, thread={thread_id}, chars={characters}, tokens={tokens_used}")
        return
    logfire.info(
        "LLM call completed",
        model=model,
        thread_id=thread_id,
        characters=characters,
        tokens_used=tokens_used,
    )

"""
Health Check Endpoints.

Root banner, liveness and version endpoints. They touch no database so load
balancers can poll them cheaply.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from tabdeel_pulse.server.core import constant

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Root",
    description="Plain-text banner confirming the backend is running.",
)
async def root() -> str:
    return constant.ROOT_MESSAGE


@router.get(
    "/health",
    summary="Health Check",
    description="Liveness probe for the API process.",
    response_description="Always {\"status\": \"ok\"} while the process serves requests.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Package version and the API schema version the dashboard should expect.",
    response_description="Version object.",
)
async def version():
    """Report ``constant.VERSION`` and ``constant.SCHEMA_VERSION``."""
    return {"version": constant.VERSION, "schema_version": constant.SCHEMA_VERSION}

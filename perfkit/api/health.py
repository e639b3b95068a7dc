"""Health check endpoints.

``/ready`` reports whether the commerce platform connection is configured,
since every performance route goes through it.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from perfkit.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response schema."""

    status: str
    platform_url: str
    platform_token_configured: bool
    slow_request_ms: float


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health."""
    return HealthResponse(
        status="healthy",
        service="sheet-perfkit",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """Report platform configuration.

    Returns:
        ``ready`` when a platform URL and admin token are set, otherwise
        ``unconfigured``. The platform itself is not contacted.
    """
    token_configured = bool(settings.medusa_api_token)
    ready = token_configured and bool(settings.medusa_backend_url)
    return ReadinessResponse(
        status="ready" if ready else "unconfigured",
        platform_url=settings.medusa_backend_url,
        platform_token_configured=token_configured,
        slow_request_ms=settings.slow_request_ms,
    )

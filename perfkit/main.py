"""Sheet perfkit main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from perfkit.api.health import router as health_router
from perfkit.api.middleware import setup_middleware
from perfkit.api.performance import router as performance_router
from perfkit.api.schemas import ErrorResponse
from perfkit.api.widget import router as widget_router
from perfkit.domain.exceptions import DomainError
from perfkit.infrastructure.config import settings
from perfkit.infrastructure.log_config import configure_logging
from perfkit.infrastructure.medusa_client import MedusaClientError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level)
    logger.info(
        "Starting sheet perfkit API",
        version=settings.api_version,
        debug=settings.debug,
        platform_url=settings.medusa_backend_url,
    )

    yield

    logger.info("Shutting down sheet perfkit API")


app = FastAPI(
    title="Sheet Perfkit API",
    description="Admin performance endpoints for sheet catalogs",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(performance_router)
app.include_router(widget_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list | dict | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details if details is not None else [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors as invalid arguments."""
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "INVALID_ARGUMENT",
        exc.message,
        exc.details,
    )


@app.exception_handler(MedusaClientError)
async def platform_exception_handler(
    request: Request, exc: MedusaClientError
) -> JSONResponse:
    """Handle platform API errors."""
    logger.warning(
        "Platform API error",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(
            request, status.HTTP_404_NOT_FOUND, "NOT_FOUND", exc.message
        )
    return _error_response(
        request,
        status.HTTP_502_BAD_GATEWAY,
        "UPSTREAM_ERROR",
        exc.message,
        {"upstream_status": exc.status_code},
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return _error_response(request, exc.status_code, error_code, message, details)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )

"""API middleware.

Tags every request with a correlation ID and times the performance routes.
The timing log is what operators read when comparing the update workflow
against the ``variants.id`` query on large sheet catalogs.
"""

import re
import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from perfkit.infrastructure.config import settings

logger = structlog.get_logger()

# Matches /admin/performance/product/{id} and its /widget page
PERFORMANCE_PATH = re.compile(
    r"^/admin/performance/product/(?P<product_id>[^/]+)(?P<widget>/widget)?/?$"
)


def describe_performance_request(method: str, path: str) -> tuple[str, str] | None:
    """Name the performance operation a request runs.

    Args:
        method: HTTP method.
        path: Request path.

    Returns:
        ``(product_id, operation)`` for performance routes, otherwise None.
        The operation is ``update_workflow``, ``variant_query`` or ``widget``.
    """
    match = PERFORMANCE_PATH.match(path)
    if match is None:
        return None
    if match.group("widget"):
        operation = "widget"
    elif method == "POST":
        operation = "update_workflow"
    else:
        operation = "variant_query"
    return match.group("product_id"), operation


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Correlate and time requests.

    The request ID is taken from ``X-Request-ID`` or generated, stored on
    ``request.state`` and bound into structlog contextvars so platform client
    logs carry it. Performance routes also bind ``product_id`` and
    ``operation``; their duration is returned in ``X-Duration-Ms`` and logged
    as a warning once it reaches ``settings.slow_request_ms``.
    """

    REQUEST_ID_HEADER = "X-Request-ID"
    DURATION_HEADER = "X-Duration-Ms"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = request.headers.get(self.REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        context = {"request_id": request_id}
        performance = describe_performance_request(request.method, request.url.path)
        if performance is not None:
            context["product_id"], context["operation"] = performance
        structlog.contextvars.bind_contextvars(**context)

        start_time = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            status_code = getattr(response, "status_code", 500)
            if performance is None:
                logger.debug(
                    "Request completed",
                    method=request.method,
                    path=request.url.path,
                    status_code=status_code,
                    duration_ms=duration_ms,
                )
            elif duration_ms >= settings.slow_request_ms:
                logger.warning(
                    "Slow performance request",
                    status_code=status_code,
                    duration_ms=duration_ms,
                    threshold_ms=settings.slow_request_ms,
                )
            else:
                logger.info(
                    "Performance request completed",
                    status_code=status_code,
                    duration_ms=duration_ms,
                )
            structlog.contextvars.unbind_contextvars(*context)

        response.headers[self.REQUEST_ID_HEADER] = request_id
        if performance is not None:
            response.headers[self.DURATION_HEADER] = str(duration_ms)
        return response


def setup_middleware(app: FastAPI) -> None:
    """Configure middleware for the application.

    Uncaught exceptions are turned into error responses by the handlers
    registered in ``perfkit.main``.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestTimingMiddleware)

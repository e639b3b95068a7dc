"""API layer module.

Contains FastAPI routers and response schemas.
"""

from perfkit.api.health import router as health_router
from perfkit.api.performance import router as performance_router
from perfkit.api.widget import router as widget_router

__all__ = [
    "health_router",
    "performance_router",
    "widget_router",
]

"""API routes."""

from .enhancement import router as enhancement_router
from .templates import router as templates_router
from .status import router as status_router
from .health import router as health_router

__all__ = [
    "enhancement_router",
    "templates_router",
    "status_router",
    "health_router",
]

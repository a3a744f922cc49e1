"""Health check routes."""

from fastapi import APIRouter

from ..schemas import HealthResponse
from ... import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns the status of the API and its components. Never touches the
    network: AI backend reachability lives under /api/v1/status.
    """
    components = {}

    # Check the rule path end to end
    try:
        from ...enhancement import RuleEngine
        from ...core.types import EnhancementRequest, Intent
        RuleEngine().enhance(EnhancementRequest(intent=Intent.FIX, user_input="health check"))
        components["enhancement"] = "healthy"
    except Exception:
        components["enhancement"] = "unavailable"

    # Check the template catalog
    try:
        from ...templates import PROMPT_TEMPLATES
        components["templates"] = "healthy" if PROMPT_TEMPLATES else "unavailable"
    except Exception:
        components["templates"] = "unavailable"

    # Check settings load
    try:
        from ...core.config import get_settings
        get_settings()
        components["configuration"] = "healthy"
    except Exception:
        components["configuration"] = "unavailable"

    all_healthy = all(v == "healthy" for v in components.values())
    status = "healthy" if all_healthy else "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        components=components
    )


@router.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "BetterPrompts API",
        "version": __version__,
        "description": "Turn rough developer requests into clear AI prompts",
        "docs": "/docs",
        "endpoints": {
            "enhance": "/api/v1/enhance",
            "classify": "/api/v1/enhance/classify",
            "templates": "/api/v1/templates",
            "status": "/api/v1/status",
            "health": "/health"
        }
    }

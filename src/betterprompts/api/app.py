"""FastAPI application factory."""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import BetterPrompts, __version__
from ..core.config import get_settings
from ..core.log import configure_logging
from .routes import (
    enhancement_router,
    templates_router,
    status_router,
    health_router,
)


def create_app(
    title: str = "BetterPrompts API",
    description: str = "Turn rough developer requests into clear AI prompts",
    version: str = __version__,
    enable_cors: bool = True,
    cors_origins: Optional[List[str]] = None,
    bp: Optional[BetterPrompts] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title
        description: API description
        version: API version
        enable_cors: Whether to enable CORS
        cors_origins: Allowed CORS origins (default from settings)
        bp: Shared BetterPrompts instance (one is created if omitted)

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.api.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Configure CORS
    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Shared across requests; holds the availability caches
    app.state.bp = bp or BetterPrompts()

    # Include routers
    app.include_router(health_router)
    app.include_router(enhancement_router, prefix="/api/v1")
    app.include_router(templates_router, prefix="/api/v1")
    app.include_router(status_router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False,
    workers: int = 1
) -> None:
    """
    Run the API server.

    Args:
        host: Host to bind to (default from settings)
        port: Port to listen on (default from settings)
        reload: Enable auto-reload
        workers: Number of worker processes
    """
    import uvicorn

    settings = get_settings()
    configure_logging(settings.logging)

    uvicorn.run(
        "betterprompts.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
        workers=workers,
        log_level=settings.logging.level.lower()
    )


if __name__ == "__main__":
    run_server()

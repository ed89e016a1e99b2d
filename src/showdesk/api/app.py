"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from showdesk.api.auth import router as auth_router
from showdesk.api.endpoints import router as api_router
from showdesk.api.pages import router as pages_router
from showdesk.app_logging import configure_logging
from showdesk.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="showdesk")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    app.include_router(api_router)
    app.include_router(auth_router)
    app.include_router(pages_router)
    logger.info("Application created for %s", container.settings.environment)
    return app

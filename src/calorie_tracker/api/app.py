"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calorie_tracker.api.auth import router as auth_router
from calorie_tracker.api.body import router as body_router
from calorie_tracker.api.nutrition import router as nutrition_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Calorie tracker API starting (environment=%s)",
            app.state.container.settings.environment,
        )
        yield

    app = FastAPI(title="Calorie Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(nutrition_router)
    app.include_router(body_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app

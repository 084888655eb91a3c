"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipebox.api import auth, engagement, recipes, users
from recipebox.config import Settings, get_settings
from recipebox.database import Database
from recipebox.errors import register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application around explicitly constructed settings and store handle."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        if settings.auto_create_tables:
            database.create_all()
        logger.info(f"Recipebox API started ({settings.environment})")
        yield
        database.dispose()
        logger.info("Recipebox API stopped")

    app = FastAPI(
        title="Recipebox API",
        description="Recipe sharing with likes and reviews",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Registered first so CORSMiddleware wraps the catch-all 500 handler
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(recipes.router)
    app.include_router(engagement.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app

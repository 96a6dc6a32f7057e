"""Repository endpoints (mock CRUD)."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, status

from workflow_backend.server.mock_data import (
    CREATED_REPOSITORY_ID,
    mock_repositories,
    sample_repository,
)
from workflow_backend.server.models import Repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/repositories", tags=["repositories"])


@router.get("")
def list_repositories() -> dict[str, Any]:
    repositories = mock_repositories()
    return {
        "repositories": [r.to_json() for r in repositories],
        "total": len(repositories),
        "status": "success",
    }


@router.get("/{repo_id}")
def get_repository(repo_id: str) -> dict[str, Any]:
    return {
        "repository": sample_repository().to_json(),
        "repo_id": repo_id,
        "status": "success",
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def connect_repository(payload: Repository | None = None) -> dict[str, Any]:
    logger.debug(
        "Repository connect requested",
        extra={"full_name": payload.full_name if payload else ""},
    )
    return {
        "message": "Repository connected successfully",
        "repository_id": CREATED_REPOSITORY_ID,
        "status": "success",
    }


@router.put("/{repo_id}")
def update_repository(repo_id: str, payload: Repository | None = None) -> dict[str, Any]:
    return {
        "message": "Repository updated successfully",
        "repository_id": repo_id,
        "status": "success",
    }


@router.delete("/{repo_id}")
def disconnect_repository(repo_id: str) -> dict[str, Any]:
    return {
        "message": "Repository disconnected successfully",
        "repository_id": repo_id,
        "status": "success",
    }

"""Task endpoints (mock CRUD)."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, status

from workflow_backend.server.mock_data import CREATED_TASK_ID, mock_tasks, sample_task
from workflow_backend.server.models import Task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("")
def list_tasks() -> dict[str, Any]:
    tasks = mock_tasks()
    return {
        "tasks": [t.to_json() for t in tasks],
        "total": len(tasks),
        "status": "success",
    }


@router.get("/{task_id}")
def get_task(task_id: str) -> dict[str, Any]:
    return {"task": sample_task(task_id).to_json(), "status": "success"}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(payload: Task | None = None) -> dict[str, Any]:
    logger.debug("Task create requested", extra={"title": payload.title if payload else ""})
    return {
        "message": "Task created successfully",
        "task_id": CREATED_TASK_ID,
        "status": "success",
    }


@router.put("/{task_id}")
def update_task(task_id: str, payload: Task | None = None) -> dict[str, Any]:
    return {
        "message": "Task updated successfully",
        "task_id": task_id,
        "status": "success",
    }


@router.delete("/{task_id}")
def delete_task(task_id: str) -> dict[str, Any]:
    return {
        "message": "Task deleted successfully",
        "task_id": task_id,
        "status": "success",
    }

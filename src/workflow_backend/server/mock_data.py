"""Literal payloads served by the API until a real store exists.

Builders return fresh instances on every call so a handler can never leak
changes into another request.
"""

from __future__ import annotations

from workflow_backend.server.models import Repository, Task

CREATED_TASK_ID = "new-task-123"
CREATED_REPOSITORY_ID = 123


def mock_tasks() -> list[Task]:
    return [
        Task(
            id="task-1",
            title="Implement user authentication",
            description="Add JWT-based authentication to the API",
            status="in_progress",
            repository="workflow",
            epic="authentication",
            branch="feature/auth",
            created_at="2024-01-15T10:00:00Z",
            updated_at="2024-01-15T14:30:00Z",
            started_at="2024-01-15T11:00:00Z",
            tokens_used=1500,
        ),
        Task(
            id="task-2",
            title="Setup database migrations",
            description="Create initial database schema and migration system",
            status="completed",
            repository="workflow",
            epic="infrastructure",
            branch="feature/db-setup",
            created_at="2024-01-14T09:00:00Z",
            updated_at="2024-01-15T16:00:00Z",
            started_at="2024-01-14T10:00:00Z",
            completed_at="2024-01-15T16:00:00Z",
            tokens_used=2300,
        ),
    ]


def sample_task(task_id: str) -> Task:
    return Task(
        id=task_id,
        title="Sample Task",
        description="This is a sample task for testing",
        status="pending",
        repository="workflow",
        epic="development",
        created_at="2024-01-15T10:00:00Z",
        updated_at="2024-01-15T10:00:00Z",
        tokens_used=0,
    )


def _workflow_repository() -> Repository:
    return Repository(
        id=1,
        name="workflow",
        full_name="JokerTrickster/workflow",
        description="AI-powered workflow management system",
        private=False,
        language="TypeScript",
        url="https://api.github.com/repos/JokerTrickster/workflow",
        html_url="https://github.com/JokerTrickster/workflow",
        clone_url="https://github.com/JokerTrickster/workflow.git",
        stars=15,
        forks=3,
        is_connected=True,
        last_sync="2024-01-15T14:30:00Z",
        created_at="2024-01-10T10:00:00Z",
        updated_at="2024-01-15T14:30:00Z",
        topics=["workflow", "ai", "automation"],
    )


def mock_repositories() -> list[Repository]:
    return [
        _workflow_repository(),
        Repository(
            id=2,
            name="backend-api",
            full_name="JokerTrickster/backend-api",
            description="Backend API for workflow management",
            private=True,
            language="Go",
            url="https://api.github.com/repos/JokerTrickster/backend-api",
            html_url="https://github.com/JokerTrickster/backend-api",
            clone_url="https://github.com/JokerTrickster/backend-api.git",
            stars=8,
            forks=1,
            is_connected=False,
            created_at="2024-01-12T15:00:00Z",
            updated_at="2024-01-14T09:00:00Z",
            topics=["api", "golang", "backend"],
        ),
    ]


def sample_repository() -> Repository:
    # Any id resolves to the same repository; the requested id is echoed separately.
    return _workflow_repository()

"""Test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from workflow_backend.config import Config, load_config
from workflow_backend.gateway import create_gateway_app
from workflow_backend.server import create_app

RECOGNIZED_ENV_VARS = (
    "PORT",
    "SERVER_PORT",
    "SERVER_HOST",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_CHARSET",
    "DB_CONNECT_ON_STARTUP",
    "GITHUB_TOKEN",
    "GITHUB_WEBHOOK_URL",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Unset every recognized variable and run from an empty directory (no `.env`)."""
    for name in RECOGNIZED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(clean_env: Path) -> Config:
    """Provide a default configuration."""
    return load_config()


@pytest.fixture
def api_client(config: Config) -> TestClient:
    """Provide a client for the versioned API surface."""
    return TestClient(create_app(config))


@pytest.fixture
def gateway_client() -> TestClient:
    """Provide a client for the legacy gateway surface."""
    return TestClient(create_gateway_app())

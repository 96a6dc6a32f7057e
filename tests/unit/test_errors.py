from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from workflow_backend.config import Config
from workflow_backend.server.app import create_app


def test_unhandled_error_returns_500_envelope(
    config: Config, caplog: pytest.LogCaptureFixture
) -> None:
    app = create_app(config)

    @app.get("/api/v1/explode")
    def explode() -> dict[str, str]:
        raise RuntimeError("kaboom")

    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="workflow_backend.server.errors"):
        resp = client.get("/api/v1/explode")

    assert resp.status_code == 500
    assert resp.json() == {"status": "error", "message": "Internal Server Error"}

    records = [r for r in caplog.records if r.name == "workflow_backend.server.errors"]
    assert len(records) == 1
    assert records[0].exc_info is not None
    assert "kaboom" in str(records[0].exc_info[1])


def test_error_envelope_does_not_leak_exception_text(config: Config) -> None:
    app = create_app(config)

    @app.post("/api/v1/explode")
    def explode() -> dict[str, str]:
        raise KeyError("secret-detail")

    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post("/api/v1/explode")

    assert resp.status_code == 500
    assert "secret-detail" not in resp.text

"""Unit tests for the CLI entrypoint (uvicorn is patched out)."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI

import workflow_backend.main as main_module


@pytest.fixture
def served(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[dict[str, Any]]:
    calls: dict[str, Any] = {}

    def fake_run(app: FastAPI, **kwargs: Any) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield calls
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_serve_api_uses_server_config(
    served: dict[str, Any], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SERVER_HOST", "127.0.0.1")
    monkeypatch.setenv("SERVER_PORT", "9100")

    assert main_module.main(["serve"]) == 0

    assert served["host"] == "127.0.0.1"
    assert served["port"] == 9100
    assert served["app"].title == "Workflow Backend"


def test_serve_api_port_variable_wins(
    served: dict[str, Any], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SERVER_PORT", "9100")
    monkeypatch.setenv("PORT", "7000")

    assert main_module.main(["serve"]) == 0

    assert served["port"] == 7000


def test_serve_gateway_defaults(served: dict[str, Any]) -> None:
    assert main_module.main(["serve", "--surface", "gateway"]) == 0

    assert served["host"] == "0.0.0.0"
    assert served["port"] == 8080
    assert served["app"].title == "AI Git Workbench Gateway"


def test_cli_flags_override_config(served: dict[str, Any]) -> None:
    assert main_module.main(["serve", "--host", "example.local", "--port", "1234"]) == 0

    assert served["host"] == "example.local"
    assert served["port"] == 1234


def test_non_numeric_port_is_reported(
    served: dict[str, Any], monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SERVER_PORT", "http")

    assert main_module.main(["serve"]) == 2

    assert "Invalid port" in capsys.readouterr().err
    assert "app" not in served


def test_invalid_boolean_is_a_configuration_error(
    served: dict[str, Any], monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DB_CONNECT_ON_STARTUP", "maybe")

    assert main_module.main(["serve"]) == 2

    assert "Configuration error" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main_module.build_parser().parse_args([])


def test_missing_dotenv_is_logged_to_stdout(
    served: dict[str, Any], capsys: pytest.CaptureFixture[str]
) -> None:
    assert main_module.main(["serve"]) == 0

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line.strip()]
    messages = [line["message"] for line in lines]
    assert "No .env file found, using environment variables" in messages
    assert messages.index("No .env file found, using environment variables") < messages.index(
        "Server starting"
    )


def test_dotenv_present_is_not_reported(
    served: dict[str, Any], clean_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (clean_env / ".env").write_text("SERVER_PORT=9200\n", encoding="utf-8")

    assert main_module.main(["serve"]) == 0

    assert "No .env file found" not in capsys.readouterr().out
    assert served["port"] == 9200

"""Configuration for the workflow backend.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Every option falls back to a fixed default when its variable is absent *or empty*.
Values are plain strings where the deployment treats them as such (ports included);
nothing here validates them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")

Surface = Literal["api", "gateway"]


class ServerConfig(BaseSettings):
    """Bind address for the HTTP server."""

    port: str = Field(default="8080", description="Port the API surface listens on")
    host: str = Field(default="localhost", description="Host the API surface binds to")

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )


class DatabaseConfig(BaseSettings):
    """MySQL connection parameters."""

    host: str = Field(default="localhost", description="Database host")
    port: str = Field(default="3306", description="Database port")
    user: str = Field(default="root", description="Database user")
    password: str = Field(default="", description="Database password")
    name: str = Field(default="workflow", description="Database (schema) name")
    charset: str = Field(default="utf8mb4", description="Connection character set")

    connect_on_startup: bool = Field(
        default=False,
        description=(
            "If true, the API surface opens a pooled connection at startup and refuses "
            "to start when the database is unreachable."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )


class GitHubConfig(BaseSettings):
    """Configuration for the GitHub integration."""

    token: str = Field(default="", description="GitHub personal access token")
    webhook_url: str = Field(default="", description="Public URL GitHub delivers webhooks to")

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )


class Config(BaseSettings):
    """Top-level settings, loaded once per process start."""

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )


def load_config(env_file: Path = DEFAULT_ENV_FILE) -> Config:
    """Load settings from the environment, with `env_file` as an optional override.

    A missing override file is not an error: it is logged and the environment plus
    built-in defaults are used.
    """

    if not env_file.is_file():
        logger.info(
            "No .env file found, using environment variables",
            extra={"env_file": str(env_file)},
        )

    return Config(
        server=ServerConfig(_env_file=env_file),
        database=DatabaseConfig(_env_file=env_file),
        github=GitHubConfig(_env_file=env_file),
        _env_file=env_file,
    )


def resolve_port(config: Config, surface: Surface = "api") -> str:
    """Port to listen on.

    `PORT` wins when set. Otherwise the API surface uses `SERVER_PORT` (via config)
    and the gateway uses its historical default of 8080.
    """

    port = os.getenv("PORT", "")
    if port:
        return port
    if surface == "gateway":
        return "8080"
    return config.server.port

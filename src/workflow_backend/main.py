"""CLI entrypoint: load configuration, configure logging and serve a surface."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from pydantic import ValidationError

from workflow_backend import __version__
from workflow_backend.config import load_config, resolve_port
from workflow_backend.gateway import create_gateway_app
from workflow_backend.logging import configure_logging
from workflow_backend.server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-backend",
        description="Workflow backend HTTP server",
    )
    parser.add_argument("--version", action="version", version=f"workflow-backend {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run an HTTP surface with uvicorn")
    serve.add_argument(
        "--surface",
        choices=["api", "gateway"],
        default="api",
        help="'api' for the versioned REST server (default), 'gateway' for the legacy API",
    )
    serve.add_argument(
        "--host",
        default=None,
        help="Bind host (defaults to SERVER_HOST for 'api', 0.0.0.0 for 'gateway')",
    )
    serve.add_argument(
        "--port",
        default=None,
        help="Bind port (defaults to PORT, then SERVER_PORT / 8080)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Bootstrap handler so messages from config loading (e.g. a missing .env) are emitted;
    # replaced below once the configured level is known.
    configure_logging("INFO")

    try:
        config = load_config()
    except ValidationError as e:
        print("Configuration error (check your environment / .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    # `serve` is the only subcommand.
    if args.surface == "gateway":
        app = create_gateway_app()
        host = args.host or "0.0.0.0"
    else:
        app = create_app(config)
        host = args.host or config.server.host
    port_value = args.port or resolve_port(config, args.surface)

    try:
        port = int(port_value)
    except ValueError:
        print(f"Invalid port: {port_value!r}", file=sys.stderr)
        return 2

    logger.info(
        "Server starting",
        extra={"surface": args.surface, "host": host, "port": port},
    )
    uvicorn.run(app, host=host, port=port, log_config=None, access_log=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

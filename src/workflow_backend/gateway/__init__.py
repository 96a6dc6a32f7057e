"""Legacy gateway surface (placeholder endpoints behind a no-op auth gate)."""

from __future__ import annotations

__all__ = ["create_gateway_app"]

from workflow_backend.gateway.app import create_gateway_app

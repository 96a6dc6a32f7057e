"""FastAPI server for the workflow backend (the versioned API surface).

- Keep routing and HTTP concerns (CORS, error envelopes, access logging) here
- Handlers return mock payloads from `mock_data` until a store exists
"""

from __future__ import annotations

__all__ = ["create_app"]

from workflow_backend.server.app import create_app

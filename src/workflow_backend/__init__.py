"""Workflow Backend.

HTTP backend for AI-assisted workflow and git management:
- configuration loaded from the environment and `.env`
- structured logging
- a versioned REST API (`workflow_backend.server`) and the legacy gateway
  (`workflow_backend.gateway`)
"""

__version__ = "1.0.0"

from workflow_backend.config import Config, load_config

__all__ = ["__version__", "Config", "load_config"]

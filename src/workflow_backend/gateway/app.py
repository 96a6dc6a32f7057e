"""Legacy gateway app.

An older API layout that predates `workflow_backend.server`. Every endpoint is a
placeholder that acknowledges the call by name; groups other than `auth` sit
behind :func:`require_auth`, which does not check anything yet.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, FastAPI, Header, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from workflow_backend import __version__
from workflow_backend.server.errors import install_error_handlers
from workflow_backend.server.middleware import CallNext, install_access_log

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def require_auth(authorization: str | None = Header(default=None)) -> None:
    """Auth gate for protected groups.

    Accepts every request; the header is only read so it shows up in the OpenAPI schema.
    """

    # TODO: validate the bearer token once GitHub OAuth issues JWTs.
    if authorization is None:
        logger.debug("Request without Authorization header let through")


def _placeholder(message: str) -> Callable[[], dict[str, str]]:
    def handler() -> dict[str, str]:
        return {"message": message}

    return handler


def _add(router: APIRouter, method: str, path: str, message: str) -> None:
    router.add_api_route(path, _placeholder(message), methods=[method])


def _auth_router() -> APIRouter:
    router = APIRouter(prefix="/auth", tags=["auth"])
    _add(router, "GET", "/github", "GitHub auth endpoint")
    _add(router, "GET", "/github/callback", "GitHub callback endpoint")
    _add(router, "POST", "/logout", "Logout endpoint")
    return router


def _protected(prefix: str, tag: str) -> APIRouter:
    return APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(require_auth)])


def _repos_router() -> APIRouter:
    router = _protected("/repos", "repos")
    _add(router, "GET", "/", "Get repos endpoint")
    _add(router, "POST", "/clone", "Clone repo endpoint")
    _add(router, "GET", "/{repo_id}/status", "Repo status endpoint")
    return router


def _tasks_router() -> APIRouter:
    router = _protected("/tasks", "tasks")
    _add(router, "GET", "/", "Get tasks endpoint")
    _add(router, "POST", "/", "Create task endpoint")
    _add(router, "PUT", "/{task_id}", "Update task endpoint")
    _add(router, "DELETE", "/{task_id}", "Delete task endpoint")
    _add(router, "POST", "/{task_id}/execute", "Execute task endpoint")
    return router


def _ai_router() -> APIRouter:
    router = _protected("/ai", "ai")
    _add(router, "POST", "/process", "AI process endpoint")
    _add(router, "GET", "/tokens/status", "Token status endpoint")
    return router


def _notifications_router() -> APIRouter:
    router = _protected("/notifications", "notifications")
    _add(router, "POST", "/subscribe", "Subscribe notifications endpoint")
    _add(router, "POST", "/send", "Send notification endpoint")
    return router


async def _answer_options(request: Request, call_next: CallNext) -> Response:
    """Answer any OPTIONS request with 204, preflight or not."""

    if request.method == "OPTIONS":
        return Response(status_code=204)
    return await call_next(request)


def create_gateway_app() -> FastAPI:
    app = FastAPI(
        title="AI Git Workbench Gateway",
        version=__version__,
        description="Legacy placeholder API kept alongside the versioned REST server.",
    )

    # Registered before CORS so CORS stays outermost and still answers real preflights.
    app.middleware("http")(_answer_options)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Authorization"],
    )
    install_access_log(app)
    install_error_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "message": "AI Git Workbench Backend is running"}

    api = APIRouter(prefix=API_PREFIX)
    for router in (
        _auth_router(),
        _repos_router(),
        _tasks_router(),
        _ai_router(),
        _notifications_router(),
    ):
        api.include_router(router)
    app.include_router(api)
    return app

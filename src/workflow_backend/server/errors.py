"""Error envelopes for the REST server.

Every error leaves the API as `{"status": "error", "message": ...}`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workflow_backend.server.models import ErrorEnvelope

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(message=message).model_dump(mode="json"),
    )


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only request bodies are decoded into models, so any validation failure is a bad body.
    logger.info(
        "Rejected request body",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return error_response(400, INVALID_BODY_MESSAGE)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error while serving request",
        extra={"method": request.method, "path": request.url.path},
    )
    return error_response(500, "Internal Server Error")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _invalid_request)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error)

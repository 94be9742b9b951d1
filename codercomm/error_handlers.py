"""Exception handlers rendering failures in the API envelope."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _detail_messages(detail: Any) -> list[str]:
    if isinstance(detail, str):
        return [detail]
    if isinstance(detail, list):
        return [str(item) for item in detail]
    if detail is None:
        return []
    return [str(detail)]


def error_response(status_code: int, errors: list[str], message: str | None = None) -> JSONResponse:
    payload = ErrorResponse(errors=errors, message=message or (errors[0] if errors else "Error"))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    errors = _detail_messages(exc.detail)
    response = error_response(exc.status_code, errors)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        errors.append(f"{location}: {message}" if location else message)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors, message="Validation failed")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ["Internal server error"])


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["error_response", "register_error_handlers"]

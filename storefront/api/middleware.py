"""Request logging and centralized error translation."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.utils.exceptions import StorefrontError


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_response(
    status_code: int,
    message: str,
    headers: Dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build the single JSON error shape used by every route."""

    content: Dict[str, Any] = {"error": message, "timestamp": _timestamp()}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def status_code_for(exc: BaseException) -> int:
    """Status carried by the exception (``status_code`` or ``status``), else 500."""

    for attribute in ("status_code", "status"):
        value = getattr(exc, attribute, None)
        if isinstance(value, int) and 400 <= value <= 599:
            return value
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def log_requests(request: Request, call_next):
    logger.info("{} {}", request.method, request.url.path)
    return await call_next(request)


async def translate_errors(request: Request, call_next):
    """Last line of defence for exceptions no handler claimed."""

    try:
        return await call_next(request)
    except Exception as exc:
        logger.opt(exception=exc).error(
            "Error: {}", exc, method=request.method, path=request.url.path
        )
        return error_response(status_code_for(exc), str(exc) or type(exc).__name__)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc).error("Error: {}", exc.message, path=request.url.path)
    else:
        logger.info("Request rejected", status=exc.status_code, error=exc.message)
    extra = {"details": exc.details} if exc.details else {}
    return error_response(exc.status_code, exc.message, **extra)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation failed",
        details=jsonable_errors(exc),
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    # ``ctx`` may hold exception instances that are not JSON serialisable.
    return jsonable_encoder(
        [{key: value for key, value in error.items() if key != "ctx"} for error in exc.errors()]
    )


def install_error_handling(app: FastAPI) -> None:
    """Register request logging, then error translation, after all routes.

    Starlette wraps every route with middleware and exception handlers
    regardless of registration order, so routes mounted earlier are covered.
    """

    app.middleware("http")(log_requests)
    app.middleware("http")(translate_errors)
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

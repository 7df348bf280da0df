"""Centralized exception handlers for the billiards admin service."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from http import HTTPStatus
from typing import Any, Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from billiards_admin.domain.errors import (
    BilliardsAdminError,
    InvalidInterval,
    InvalidTableState,
    InvoiceCreationFailed,
    OperationInProgress,
    SessionNotFound,
    TableNotFound,
    UpstreamRequestFailed,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: Dict[Type[BilliardsAdminError], int] = {
    TableNotFound: status.HTTP_404_NOT_FOUND,
    SessionNotFound: status.HTTP_404_NOT_FOUND,
    InvalidTableState: status.HTTP_409_CONFLICT,
    OperationInProgress: status.HTTP_409_CONFLICT,
    InvoiceCreationFailed: status.HTTP_409_CONFLICT,
    InvalidInterval: 422,
    UpstreamRequestFailed: status.HTTP_502_BAD_GATEWAY,
}


def _flatten_detail(detail: Any) -> str:
    """Convert arbitrary exception detail payloads into a string message."""
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        if "detail" in detail:
            nested = detail["detail"]
            if isinstance(nested, str):
                return nested
        return "; ".join(f"{key}: {value}" for key, value in detail.items())
    if isinstance(detail, Iterable) and not isinstance(detail, (bytes, bytearray)):
        return "; ".join(_flatten_detail(item) for item in detail)
    if detail is None:
        return "An error occurred"
    return str(detail)


def _http_code(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return "HTTP_ERROR"


def status_for(exc: BilliardsAdminError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that return a normalized ``{"detail", "code"}`` payload."""

    @app.exception_handler(BilliardsAdminError)
    async def domain_exception_handler(
        request: Request, exc: BilliardsAdminError
    ) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.warning("%s %s failed upstream: %s", request.method, request.url, exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": exc.code.value},
        )

    # Starlette's base class also covers routing 404s and 405s.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        detail = _flatten_detail(exc.detail)
        response = JSONResponse(
            status_code=exc.status_code,
            content={"detail": detail, "code": _http_code(exc.status_code)},
        )

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        messages = []
        for error in exc.errors():
            location = [str(loc) for loc in error.get("loc", []) if loc != "body"]
            message = error.get("msg", "Invalid input")
            if location:
                messages.append(f"{'.'.join(location)}: {message}")
            else:
                messages.append(message)

        detail = "; ".join(messages) if messages else "Invalid request"
        return JSONResponse(status_code=422, content={"detail": detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


__all__ = ["register_exception_handlers", "status_for"]

"""Error responses for the HTTP layer.

Every failure leaves the API as ``{"error": ..., "details": ...}`` with the
``details`` key only present when there is something to add.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """A terminal, user-facing failure for the current request."""

    def __init__(
        self, status_code: int, error: str, details: Optional[str] = None
    ) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_body(error: str, details: Optional[str] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return body


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.error, exc.details)
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400, content=error_body("Invalid request body", details or None)
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    print(f"[api] unhandled error on {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=500, content=error_body("Internal server error", str(exc))
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error renderers on *app*."""
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)

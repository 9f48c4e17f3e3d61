# app/core/errors.py
"""
Error taxonomy for admin reads against Supabase.

  - AuthenticationTimeoutError: no principal within the auth wait window
  - PermissionDeniedError: the store rejected the read (RLS / grants)
  - DataFetchError: any other store failure, original message kept

Handlers registered by `register_exception_handlers` turn these into a
consistent JSON error body.
"""
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class AuthenticationTimeoutError(AppError):
    """Principal was not resolved in time (401)."""

    def __init__(self, timeout: float | None = None):
        details = {"timeout_seconds": timeout} if timeout is not None else {}
        super().__init__(
            message="Authentication timeout - user not resolved in time",
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTH_TIMEOUT",
            details=details,
        )


class PermissionDeniedError(AppError):
    """Supabase refused access to a table (403)."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(
            message=(
                "Supabase permissions denied. Please update the row level security "
                f"policies on the '{collection}' table to allow admin access."
            ),
            status_code=status.HTTP_403_FORBIDDEN,
            error_code="PERMISSION_DENIED",
            details={"collection": collection},
        )


class DataFetchError(AppError):
    """Any other failure talking to Supabase (502)."""

    def __init__(self, message: str, collection: str | None = None):
        self.collection = collection
        details = {"collection": collection} if collection else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="FETCH_FAILED",
            details=details,
        )


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError as a JSON error body."""
    logger.error(
        "AppError: %s (code=%s, status=%d)",
        exc.message,
        exc.error_code,
        exc.status_code,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "details": exc.details or None,
            },
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_exception_handler)  # type: ignore[arg-type]

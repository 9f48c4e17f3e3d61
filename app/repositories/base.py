# app/repositories/base.py
import logging
from typing import Any, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import BaseModel, ValidationError
from supabase import Client

from app.core.errors import DataFetchError, PermissionDeniedError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Postgres "insufficient_privilege"
PERMISSION_DENIED_CODES = {"42501"}

PERMISSION_DENIED_MARKERS = (
    "permission denied",
    "insufficient permissions",
    "row-level security",
)


def is_permission_denied(exc: APIError) -> bool:
    """
    True when PostgREST rejected the request because of access policy.

    Covers the Postgres privilege error code, HTTP 401/403 from the gateway,
    and the message variants RLS violations come back with.
    """
    code = str(exc.code or "")
    if code in PERMISSION_DENIED_CODES or code in {"401", "403"}:
        return True
    message = (exc.message or "").lower()
    return any(marker in message for marker in PERMISSION_DENIED_MARKERS)


class SupabaseRepository:
    """
    Shared plumbing for table repositories.

    - Builds queries against `table_name`.
    - Runs them and translates store errors into app errors.
    - No FastAPI, no business logic.
    """

    table_name: str = ""

    def _table(self, client: Client):
        return client.table(self.table_name)

    def _execute(self, query: Any) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except APIError as exc:
            if is_permission_denied(exc):
                logger.warning("Permission denied reading '%s': %s", self.table_name, exc.message)
                raise PermissionDeniedError(self.table_name) from exc
            logger.warning("Query on '%s' failed: %s", self.table_name, exc.message)
            raise DataFetchError(exc.message or str(exc), collection=self.table_name) from exc
        except httpx.HTTPError as exc:
            logger.warning("Supabase unreachable for '%s': %s", self.table_name, exc)
            raise DataFetchError(str(exc), collection=self.table_name) from exc
        return list(response.data or [])

    def _parse(self, model: type[ModelT], rows: list[dict[str, Any]]) -> list[ModelT]:
        """Validate raw rows; a malformed row is a fetch failure for the table."""
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as exc:
            logger.warning("Malformed row in '%s': %s", self.table_name, exc)
            raise DataFetchError(
                f"Malformed {model.__name__} row in '{self.table_name}': {exc.error_count()} validation error(s)",
                collection=self.table_name,
            ) from exc

    def _parse_one(self, model: type[ModelT], rows: list[dict[str, Any]]) -> ModelT | None:
        return self._parse(model, rows[:1])[0] if rows else None

"""Shared plumbing for the Supabase (PostgREST) repositories.

Every query goes through _execute(), which turns PostgREST and transport
errors into PersistenceError so the application layer never sees a
client-library exception.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from argus.application.services.base import LoggingMixin
from argus.domain.errors.persistence import DuplicateRecordError, PersistenceError

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a PostgREST timestamp (or bare date) into an aware UTC datetime."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: str) -> date:
    """Parse a PostgREST date column."""
    return date.fromisoformat(value[:10])


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class SupabaseRepository(LoggingMixin):
    """Base class for repositories backed by one Supabase table.

    Attributes:
        _client: Async Supabase client.
        _table: Table name.
    """

    table_name: str = ""

    def __init__(self, client: AsyncClient) -> None:
        self._client = client
        self._table = self.table_name
        self._init_logger(component="persistence")

    def _query(self) -> Any:
        return self._client.table(self._table)

    @staticmethod
    def _coerce_rows(data: object) -> list[dict[str, Any]]:
        """Normalize Supabase response payloads to a list of row dicts."""
        if not isinstance(data, list):
            return []
        return [row for row in data if isinstance(row, dict)]

    async def _execute(self, operation: str, query: Any) -> Any:
        """Run a query builder, wrapping client failures.

        Raises:
            DuplicateRecordError: When Postgres reports a unique violation.
            PersistenceError: On any other PostgREST error or a transport failure.
        """
        try:
            return await query.execute()
        except (APIError, httpx.HTTPError) as e:
            self._log_operation(operation, table=self._table).error(
                "supabase_query_failed", error=str(e)
            )
            if isinstance(e, APIError) and e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(operation, str(e), table=self._table) from e
            raise PersistenceError(operation, str(e), table=self._table) from e

    async def _fetch_rows(self, operation: str, query: Any) -> list[dict[str, Any]]:
        result = await self._execute(operation, query)
        return self._coerce_rows(result.data)

"""Shared helpers for executing Supabase queries and parsing rows."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from supabase import Client, PostgrestAPIError

from calorie_tracker.errors import PersistenceError

NO_ROWS_CODE = "PGRST116"


def execute_rows(query: Any) -> list[dict[str, Any]]:
    """Execute a query builder and return its rows."""
    try:
        response = query.execute()
    except PostgrestAPIError as exc:
        raise PersistenceError(exc.message or str(exc), code=exc.code) from exc
    return response.data or []


def fetch_single(query: Any) -> dict[str, Any] | None:
    """Fetch exactly one row; the "no rows" error code means absent."""
    try:
        response = query.single().execute()
    except PostgrestAPIError as exc:
        if exc.code == NO_ROWS_CODE:
            return None
        raise PersistenceError(exc.message or str(exc), code=exc.code) from exc
    return response.data or None


def insert_row(client: Client, table: str, row: dict[str, object]) -> dict[str, Any]:
    """Insert one row and return the stored representation."""
    rows = execute_rows(client.table(table).insert(row))
    if not rows:
        raise PersistenceError(f"Failed to insert into {table}")
    return rows[0]


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO timestamp; naive values are taken as UTC."""
    if isinstance(raw, datetime):
        parsed = raw
    else:
        parsed = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def optional_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def optional_int(value: object) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def parse_uuid(value: object) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def required_float(row: dict[str, Any], name: str) -> float:
    """Return a numeric column, raising when it is null or not a number."""
    try:
        value = optional_float(row.get(name))
    except (TypeError, ValueError):
        value = None
    if value is None:
        raise PersistenceError(f"Column {name} holds no number")
    return value

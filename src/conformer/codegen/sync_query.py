"""
Remote-sync query emitter.

Describes the incremental pull a sync client runs against the remote store:
every live row (soft-delete flag false) whose update timestamp is at or after
the last-seen cursor. Hard deletes are not observable through this query.

The template uses PostgREST filter syntax::

    task_thing?select=*&is_deleted=eq.false&updated_at=gte.{cursor}
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from conformer.infrastructure.schema.core import (
    SOFT_DELETE_FIELD,
    UPDATED_AT_FIELD,
    TableSchema,
)
from conformer.infrastructure.sql.core.identifier import quote_identifier
from conformer.utils.naming import camel_to_snake

CURSOR_SLOT = "{cursor}"


@dataclass(frozen=True)
class SyncFilter:
    column: str
    operator: str
    value: str

    def render(self) -> str:
        return f"{self.column}={self.operator}.{self.value}"


@dataclass(frozen=True)
class SyncQueryTemplate:
    """Incremental fetch bound to one table, parameterised by a cursor."""

    table_name: str
    filters: List[SyncFilter] = field(default_factory=list)

    @property
    def template(self) -> str:
        predicates = "&".join(f.render() for f in self.filters)
        return f"{self.table_name}?select=*&{predicates}"

    def render(self, cursor: datetime) -> str:
        """Fill the cursor slot with an ISO-8601 literal (naive cursors are UTC)."""
        return self.template.replace(CURSOR_SLOT, format_cursor(cursor))

    def to_sql(self) -> str:
        deleted = quote_identifier(camel_to_snake(SOFT_DELETE_FIELD))
        updated = quote_identifier(camel_to_snake(UPDATED_AT_FIELD))
        return (
            f"SELECT * FROM {quote_identifier(self.table_name)} "
            f"WHERE {deleted} = FALSE AND {updated} >= :cursor"
        )


def format_cursor(cursor: datetime) -> str:
    """
    Format a cursor timestamp as an ISO-8601 UTC literal.

    Examples:
        >>> format_cursor(datetime(2023, 7, 29, 12, 30))
        '2023-07-29T12:30:00.000Z'
    """
    if cursor.tzinfo is None:
        cursor = cursor.replace(tzinfo=timezone.utc)
    utc = cursor.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_sync_query(schema: TableSchema) -> SyncQueryTemplate:
    return SyncQueryTemplate(
        table_name=schema.table_name,
        filters=[
            SyncFilter(camel_to_snake(SOFT_DELETE_FIELD), "eq", "false"),
            SyncFilter(camel_to_snake(UPDATED_AT_FIELD), "gte", CURSOR_SLOT),
        ],
    )


__all__ = [
    "CURSOR_SLOT",
    "SyncFilter",
    "SyncQueryTemplate",
    "format_cursor",
    "generate_sync_query",
]

"""DDL SQL generation for table schemas.

Column clauses, in order:
- one per declared column, in declaration order. Plain columns render as
  ``name KIND`` plus ``NOT NULL`` unless optional; foreign keys render as
  ``target TEXT REFERENCES table(column) ON DELETE CASCADE``
- reserved ``updated_at DATETIME`` and ``is_deleted BOOLEAN NOT NULL``
- ``PRIMARY KEY (...)`` over the plain primary-key columns, when there are any
"""

from __future__ import annotations

from typing import List, Optional

from conformer.infrastructure.sql.core.identifier import (
    quote_identifier,
    quote_identifiers,
)
from conformer.utils.naming import camel_to_snake

from .core import (
    SOFT_DELETE_FIELD,
    UPDATED_AT_FIELD,
    ColumnDescriptor,
    StorageKind,
    TableSchema,
)
from .type_registry import TypeRegistry, map_storage_kind

RESERVED_COLUMN_CLAUSES = [
    f"{camel_to_snake(UPDATED_AT_FIELD)} {StorageKind.DATETIME.sql}",
    f"{camel_to_snake(SOFT_DELETE_FIELD)} {StorageKind.BOOLEAN.sql} NOT NULL",
]


def column_clause(col: ColumnDescriptor, registry: Optional[TypeRegistry] = None) -> str:
    """Convert a plain column to its SQL column definition."""
    kind = map_storage_kind(col.declared_type, registry)
    nullable_str = "" if col.is_optional else " NOT NULL"
    return f"{quote_identifier(col.storage_name)} {kind.sql}{nullable_str}"


def foreign_key_clause(col: ColumnDescriptor) -> str:
    """Convert a foreign key to its local text column with a cascading reference."""
    referenced_table = quote_identifier(camel_to_snake(col.source_table or ""))
    referenced_column = quote_identifier(camel_to_snake(col.source_column or ""))
    return (
        f"{quote_identifier(col.storage_name)} {StorageKind.TEXT.sql} "
        f"REFERENCES {referenced_table}({referenced_column}) ON DELETE CASCADE"
    )


def primary_key_clause(schema: TableSchema) -> Optional[str]:
    """Composite primary key over plain columns; None when no column is marked."""
    pk_columns = schema.primary_key_columns
    if not pk_columns:
        return None
    return f"PRIMARY KEY ({quote_identifiers(c.storage_name for c in pk_columns)})"


def generate_column_clauses(
    schema: TableSchema, registry: Optional[TypeRegistry] = None
) -> List[str]:
    clauses: List[str] = []
    for col in schema.columns:
        if col.is_foreign_key:
            clauses.append(foreign_key_clause(col))
        else:
            clauses.append(column_clause(col, registry))
    clauses.extend(RESERVED_COLUMN_CLAUSES)

    pk_clause = primary_key_clause(schema)
    if pk_clause:
        clauses.append(pk_clause)
    return clauses


def generate_create_table_ddl(
    schema: TableSchema,
    registry: Optional[TypeRegistry] = None,
    if_not_exists: bool = True,
) -> str:
    """Generate just the CREATE TABLE statement."""
    exists_clause = "IF NOT EXISTS " if if_not_exists else ""
    lines: List[str] = [f"CREATE TABLE {exists_clause}{quote_identifier(schema.table_name)} ("]
    lines.append(",\n".join(f"  {clause}" for clause in generate_column_clauses(schema, registry)))
    lines.append(");")
    return "\n".join(lines)


def generate_create_table_sql(
    schema: TableSchema,
    registry: Optional[TypeRegistry] = None,
    if_not_exists: bool = True,
) -> str:
    """Generate the DDL document for a table, with a header comment."""
    parts: List[str] = []
    parts.append(f"-- DDL for table: {schema.table_name} ({schema.type_name})")
    parts.append(generate_create_table_ddl(schema, registry, if_not_exists))
    return "\n".join(parts)


__all__ = [
    "RESERVED_COLUMN_CLAUSES",
    "column_clause",
    "foreign_key_clause",
    "primary_key_clause",
    "generate_column_clauses",
    "generate_create_table_ddl",
    "generate_create_table_sql",
]

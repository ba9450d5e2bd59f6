"""
Column model builder.

Classifies raw column declarations into ``ColumnDescriptor`` values:

- ``name`` and ``valueType`` are required; entries without them are skipped
  so one malformed column does not block generation for the whole table.
- A trailing ``?`` on the value type marks the column optional.
- A declaration is a foreign key iff it supplies ``sourceColumn``; the value
  type names the referenced table and ``targetColumn`` defaults to
  ``sourceColumn``.
- Foreign keys are never primary keys.
"""

from __future__ import annotations

from typing import Any, List, Optional, Set

from conformer.utils.logging import get_logger
from conformer.utils.naming import camel_to_snake

from .core import (
    SOFT_DELETE_FIELD,
    UPDATED_AT_FIELD,
    ColumnDescriptor,
    RawColumnDeclaration,
    TableDeclaration,
    TableSchema,
    strip_nullability,
)
from .parser import parse_column_declarations

logger = get_logger(__name__)

# Names owned by the reserved soft-delete and change-tracking columns
RESERVED_COLUMN_NAMES = frozenset(
    name
    for field_name in (SOFT_DELETE_FIELD, UPDATED_AT_FIELD)
    for name in (field_name, camel_to_snake(field_name))
)


def _text_argument(value: Any) -> Optional[str]:
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def build_column(raw: RawColumnDeclaration) -> Optional[ColumnDescriptor]:
    """
    Build a column descriptor from a raw declaration.

    Returns:
        The descriptor, or None when the declaration has no usable name or
        value type
    """
    name = _text_argument(raw.get("name"))
    declared_type = _text_argument(raw.get("valueType"))
    if name is None or declared_type is None:
        logger.debug(
            "schema.column_skipped",
            position=raw.position,
            constructor=raw.constructor,
            reason="missing name or valueType",
        )
        return None

    value_type, is_optional = strip_nullability(declared_type)
    if not value_type:
        logger.debug("schema.column_skipped", position=raw.position, reason="empty valueType")
        return None

    is_primary_key = _flag(raw.get("isPrimaryKey", False))

    if "sourceColumn" not in raw.arguments:
        return ColumnDescriptor(
            name=name,
            declared_type=declared_type,
            is_optional=is_optional,
            is_primary_key=is_primary_key,
        )

    source_column = _text_argument(raw.get("sourceColumn"))
    if source_column is None:
        logger.debug(
            "schema.column_skipped", position=raw.position, reason="empty sourceColumn"
        )
        return None
    target_column = _text_argument(raw.get("targetColumn")) or source_column

    if is_primary_key:
        logger.info(
            "schema.foreign_key_primary_key_ignored",
            column=name,
            target_column=target_column,
        )

    return ColumnDescriptor(
        name=name,
        declared_type=declared_type,
        is_optional=is_optional,
        is_primary_key=False,
        source_column=source_column,
        source_table=value_type,
        target_column=target_column,
    )


def build_columns(raw_columns: List[RawColumnDeclaration]) -> List[ColumnDescriptor]:
    """Build descriptors in declaration order, dropping unusable entries.

    A column is skipped with a warning when its name, field name or storage
    name is already taken, either by an earlier column or by one of the
    reserved ``isDeleted``/``updatedAt`` columns.
    """
    columns: List[ColumnDescriptor] = []
    seen: Set[str] = set()
    for raw in raw_columns:
        column = build_column(raw)
        if column is None:
            continue
        names = {column.name, column.field_name, column.storage_name}
        if names & RESERVED_COLUMN_NAMES:
            logger.warning(
                "schema.reserved_column_skipped",
                column=column.name,
                storage_name=column.storage_name,
                position=raw.position,
            )
            continue
        if names & seen:
            logger.warning(
                "schema.duplicate_column_skipped",
                column=column.name,
                storage_name=column.storage_name,
                position=raw.position,
            )
            continue
        seen.update(names)
        columns.append(column)
    return columns


def build_table_schema(declaration: TableDeclaration) -> TableSchema:
    """
    Parse and classify a table declaration.

    Raises:
        SchemaDeclarationError: If the declaration has no usable columns list
    """
    raw_columns = parse_column_declarations(declaration)
    columns = build_columns(raw_columns)
    logger.debug(
        "schema.table_built",
        type_name=declaration.type_name,
        declared=len(raw_columns),
        columns=len(columns),
    )
    return TableSchema(
        type_name=declaration.type_name,
        table_name=declaration.resolved_table_name,
        columns=columns,
    )


__all__ = [
    "RESERVED_COLUMN_NAMES",
    "build_column",
    "build_columns",
    "build_table_schema",
]

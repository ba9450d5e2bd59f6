"""Core table schema types for Conformer.

``RawColumnDeclaration`` is the intermediate format produced by the
declaration parser; ``ColumnDescriptor`` and ``TableSchema`` are the
validated model every emitter consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from conformer.utils.naming import camel_to_snake

NULLABILITY_MARKER = "?"

# Engine-reserved fields appended to every generated table
SOFT_DELETE_FIELD = "isDeleted"
UPDATED_AT_FIELD = "updatedAt"


class StorageKind(Enum):
    """Column types understood by the storage engine."""

    TEXT = "text"
    INTEGER = "integer"
    DOUBLE = "double"
    REAL = "real"
    BOOLEAN = "boolean"
    BLOB = "blob"
    DATETIME = "datetime"
    ANY = "any"

    @property
    def sql(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class RawColumnDeclaration:
    """One entry of a table's columns list, before classification."""

    arguments: Dict[str, Any]
    constructor: Optional[str] = None
    position: int = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self.arguments.get(key, default)


@dataclass(frozen=True)
class TableDeclaration:
    """A table declaration as read from any schema source.

    ``columns`` is left untouched until parsing so a missing or malformed
    list can be reported per table.
    """

    type_name: str
    table_name: Optional[str] = None
    columns: Any = None
    source: Optional[str] = None

    @property
    def resolved_table_name(self) -> str:
        return self.table_name or camel_to_snake(self.type_name)


@dataclass(frozen=True)
class ColumnDescriptor:
    """Definition of a single column in a table schema."""

    name: str
    declared_type: str
    is_optional: bool = False
    is_primary_key: bool = False
    source_column: Optional[str] = None
    source_table: Optional[str] = None
    target_column: Optional[str] = None

    @property
    def is_foreign_key(self) -> bool:
        return self.source_column is not None

    @property
    def value_type(self) -> str:
        """Declared type with the nullability marker stripped."""
        return strip_nullability(self.declared_type)[0]

    @property
    def field_name(self) -> str:
        """Name of the generated field: the local alias for foreign keys."""
        if self.is_foreign_key:
            return self.target_column or self.source_column or self.name
        return self.name

    @property
    def storage_name(self) -> str:
        return camel_to_snake(self.field_name)


@dataclass(frozen=True)
class TableSchema:
    """Complete schema definition for a table."""

    type_name: str
    table_name: str
    columns: List[ColumnDescriptor] = field(default_factory=list)

    @property
    def plain_columns(self) -> List[ColumnDescriptor]:
        return [c for c in self.columns if not c.is_foreign_key]

    @property
    def foreign_keys(self) -> List[ColumnDescriptor]:
        return [c for c in self.columns if c.is_foreign_key]

    @property
    def primary_key_columns(self) -> List[ColumnDescriptor]:
        """Plain columns marked as primary key, in declaration order."""
        return [c for c in self.plain_columns if c.is_primary_key]

    def column(self, name: str) -> ColumnDescriptor:
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(f"Column '{name}' not found in table '{self.table_name}'")


def strip_nullability(declared_type: str) -> tuple[str, bool]:
    """Split a declared type token into (value type, is_optional)."""
    token = declared_type.strip()
    if token.endswith(NULLABILITY_MARKER):
        return token[: -len(NULLABILITY_MARKER)].strip(), True
    return token, False


__all__ = [
    "NULLABILITY_MARKER",
    "SOFT_DELETE_FIELD",
    "UPDATED_AT_FIELD",
    "StorageKind",
    "RawColumnDeclaration",
    "TableDeclaration",
    "ColumnDescriptor",
    "TableSchema",
    "strip_nullability",
]

"""Python builder API for table declarations.

    >>> from conformer.infrastructure.schema.declarations import (
    ...     ForeignKeyColumn, TableColumn,
    ... )
    >>> class TaskThing:
    ...     table_name = "task_thing"
    ...     columns = [
    ...         TableColumn("id", str, is_primary_key=True),
    ...         TableColumn("createdAt", "Date", optional=True),
    ...         ForeignKeyColumn("otherThing", "BlankThing", "id", "blank_thing_id"),
    ...     ]

Column objects are consumed by the declaration parser like any other
constructor-style entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .core import NULLABILITY_MARKER

ValueType = Union[str, type]


def _type_token(value_type: ValueType, optional: bool) -> str:
    token = value_type if isinstance(value_type, str) else value_type.__name__
    if optional and not token.endswith(NULLABILITY_MARKER):
        token = f"{token}{NULLABILITY_MARKER}"
    return token


@dataclass(frozen=True)
class TableColumn:
    """A plain column."""

    name: str
    value_type: ValueType
    is_primary_key: bool = False
    optional: bool = False

    constructor = "TableColumn"

    def declaration_arguments(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "valueType": _type_token(self.value_type, self.optional),
            "isPrimaryKey": self.is_primary_key,
        }


@dataclass(frozen=True)
class ForeignKeyColumn:
    """A column referencing another table.

    ``value_type`` names the referenced type; ``target_column`` is the local
    column holding the reference and defaults to ``source_column``.
    """

    name: str
    value_type: ValueType
    source_column: str
    target_column: Optional[str] = None

    constructor = "ForeignKeyColumn"

    def declaration_arguments(self) -> Dict[str, Any]:
        arguments: Dict[str, Any] = {
            "name": self.name,
            "valueType": _type_token(self.value_type, False),
            "sourceColumn": self.source_column,
        }
        if self.target_column is not None:
            arguments["targetColumn"] = self.target_column
        return arguments


__all__ = ["TableColumn", "ForeignKeyColumn"]

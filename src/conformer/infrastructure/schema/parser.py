"""
Column declaration parser.

Turns the ``columns`` value of a table declaration into an ordered list of
``RawColumnDeclaration``. Accepted entry shapes:

- a mapping of arguments::

    {name: id, valueType: String, isPrimaryKey: true}

- a constructor-style single-key mapping::

    {ForeignKeyColumn: {name: otherThing, valueType: BlankThing, sourceColumn: id}}
    {ForeignKeyColumn: [otherThing, BlankThing, id, blank_thing_id]}

- a positional sequence, optionally ending with keyword arguments::

    [createdAt, Date?]
    [id, String, {isPrimaryKey: true}]

- builder API objects (``TableColumn``, ``ForeignKeyColumn``).

Any other entry (a bare string, a number) is dropped with a debug log.
Argument names may be camelCase or snake_case. Classification of the
arguments (and skipping of incomplete entries) is left to the model builder.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional, Tuple

from conformer.errors import SchemaDeclarationError
from conformer.utils.logging import get_logger
from conformer.utils.naming import snake_to_camel

from .core import RawColumnDeclaration, TableDeclaration

logger = get_logger(__name__)

ARGUMENT_ALIASES = {
    "type": "valueType",
    "primaryKey": "isPrimaryKey",
}

POSITIONAL_ARGUMENTS: Dict[Optional[str], Tuple[str, ...]] = {
    None: ("name", "valueType"),
    "TableColumn": ("name", "valueType", "isPrimaryKey"),
    "ForeignKeyColumn": ("name", "valueType", "sourceColumn", "targetColumn"),
}


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def normalize_argument_name(key: str) -> str:
    """Map ``value_type``/``type`` style keys onto the canonical camelCase."""
    camel = snake_to_camel(key)
    return ARGUMENT_ALIASES.get(camel, camel)


def _normalize_arguments(arguments: Mapping) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for key, value in arguments.items():
        if not isinstance(key, str):
            continue
        normalized[normalize_argument_name(key)] = value
    return normalized


def _positional_arguments(
    values: Sequence, constructor: Optional[str], position: int
) -> Dict[str, Any]:
    values = list(values)
    keywords: Dict[str, Any] = {}
    if values and isinstance(values[-1], Mapping):
        keywords = _normalize_arguments(values.pop())

    names = POSITIONAL_ARGUMENTS.get(constructor, POSITIONAL_ARGUMENTS[None])
    if len(values) > len(names):
        logger.debug(
            "schema.extra_positional_arguments",
            position=position,
            constructor=constructor,
            dropped=len(values) - len(names),
        )
    arguments = dict(zip(names, values))
    arguments.update(keywords)
    return arguments


def parse_entry(entry: Any, position: int) -> Optional[RawColumnDeclaration]:
    """Parse a single columns-list entry.

    Returns:
        The raw declaration, or None when the entry is not constructor-style
        (a bare string or number); such entries are dropped by the caller
    """
    if hasattr(entry, "declaration_arguments"):
        return RawColumnDeclaration(
            arguments=dict(entry.declaration_arguments()),
            constructor=getattr(entry, "constructor", None),
            position=position,
        )

    if isinstance(entry, Mapping):
        if len(entry) == 1:
            key, value = next(iter(entry.items()))
            if isinstance(key, str) and (isinstance(value, Mapping) or _is_sequence(value)):
                if isinstance(value, Mapping):
                    arguments = _normalize_arguments(value)
                else:
                    arguments = _positional_arguments(value, key, position)
                return RawColumnDeclaration(arguments, constructor=key, position=position)
        return RawColumnDeclaration(_normalize_arguments(entry), position=position)

    if _is_sequence(entry):
        return RawColumnDeclaration(
            _positional_arguments(entry, None, position), position=position
        )

    logger.debug("schema.entry_skipped", position=position, entry=repr(entry))
    return None


def parse_column_declarations(
    declaration: TableDeclaration,
) -> List[RawColumnDeclaration]:
    """
    Extract the raw column declarations of a table, in declaration order.

    Args:
        declaration: Table declaration from any schema source

    Returns:
        Ordered list of raw column declarations; entries that are not
        constructor-style are left out

    Raises:
        SchemaDeclarationError: If the columns list is missing or is not a
            sequence
    """
    columns = declaration.columns
    if columns is None:
        raise SchemaDeclarationError(
            f"Table '{declaration.type_name}' does not declare a columns list",
            type_name=declaration.type_name,
        )
    if not _is_sequence(columns):
        raise SchemaDeclarationError(
            f"Columns of table '{declaration.type_name}' must be a list, "
            f"got {type(columns).__name__}",
            type_name=declaration.type_name,
        )

    parsed = (parse_entry(entry, position) for position, entry in enumerate(columns))
    return [raw for raw in parsed if raw is not None]


__all__ = [
    "parse_column_declarations",
    "parse_entry",
    "normalize_argument_name",
]

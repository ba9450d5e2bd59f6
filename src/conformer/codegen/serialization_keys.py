"""Serialization key emitter.

Maps each generated field to its storage key. Foreign keys contribute their
local aliasing column, not the relationship name. The two engine-reserved
fields close every mapping.
"""

from typing import List, Tuple

from conformer.infrastructure.schema.core import (
    SOFT_DELETE_FIELD,
    UPDATED_AT_FIELD,
    TableSchema,
)
from conformer.utils.naming import camel_to_snake

RESERVED_SERIALIZATION_KEYS: List[Tuple[str, str]] = [
    (SOFT_DELETE_FIELD, camel_to_snake(SOFT_DELETE_FIELD)),
    (UPDATED_AT_FIELD, camel_to_snake(UPDATED_AT_FIELD)),
]


def generate_serialization_keys(schema: TableSchema) -> List[Tuple[str, str]]:
    """
    Build the ordered (field name, storage key) pairs for a table.

    Examples:
        >>> generate_serialization_keys(schema)  # doctest: +SKIP
        [('id', 'id'), ('createdAt', 'created_at'), ('blank_thing_id', 'blank_thing_id'),
         ('isDeleted', 'is_deleted'), ('updatedAt', 'updated_at')]
    """
    keys = [(col.field_name, col.storage_name) for col in schema.columns]
    keys.extend(RESERVED_SERIALIZATION_KEYS)
    return keys


def render_serialization_keys(keys: List[Tuple[str, str]]) -> str:
    width = max((len(field) for field, _ in keys), default=0)
    return "\n".join(f"{field.ljust(width)} <-> {key}" for field, key in keys)


__all__ = [
    "RESERVED_SERIALIZATION_KEYS",
    "generate_serialization_keys",
    "render_serialization_keys",
]

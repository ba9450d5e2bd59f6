"""
Registry of declared tables and their generated artifacts.

Each entry keeps the declaration together with its artifacts, which are
generated on first request and reused afterwards. The ``supamodeled``
decorator registers a class and attaches the artifacts to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from conformer.infrastructure.schema.core import TableDeclaration
from conformer.infrastructure.schema.loader import declaration_from_class
from conformer.infrastructure.schema.type_registry import TypeRegistry
from conformer.utils.logging import get_logger

from .artifacts import GeneratedArtifact, generate_artifacts

logger = get_logger(__name__)


@dataclass
class RegisteredTable:
    """A declaration and, once generated, its artifacts."""

    declaration: TableDeclaration
    artifacts: Optional[GeneratedArtifact] = None

    def generate(self) -> GeneratedArtifact:
        if self.artifacts is None:
            self.artifacts = generate_artifacts(self.declaration)
        return self.artifacts


_TABLES: Dict[str, RegisteredTable] = {}


def _lookup(type_name: str) -> RegisteredTable:
    entry = _TABLES.get(type_name)
    if entry is None:
        raise KeyError(
            f"No table declared for type '{type_name}'. Declared: {sorted(_TABLES)}"
        )
    return entry


def register_table(declaration: TableDeclaration) -> RegisteredTable:
    """
    Declare a table under its type name.

    Raises:
        ValueError: If the type name is already declared
    """
    existing = _TABLES.get(declaration.type_name)
    if existing is not None:
        raise ValueError(
            f"Type '{declaration.type_name}' already declares table "
            f"'{existing.declaration.resolved_table_name}'; unregister it first"
        )
    entry = RegisteredTable(declaration)
    _TABLES[declaration.type_name] = entry
    logger.debug(
        "registry.table_registered",
        type_name=declaration.type_name,
        source=declaration.source,
    )
    return entry


def unregister_table(type_name: str) -> None:
    """Forget a declared table and its cached artifacts."""
    _lookup(type_name)
    del _TABLES[type_name]


def get_table(type_name: str) -> TableDeclaration:
    return _lookup(type_name).declaration


def list_tables() -> List[str]:
    """Declared type names, sorted."""
    return sorted(_TABLES)


def clear_tables() -> None:
    _TABLES.clear()


def generate_registered(
    type_name: str, registry: Optional[TypeRegistry] = None
) -> GeneratedArtifact:
    """
    Artifacts of a declared table.

    With the default type registry the result is cached on the entry; an
    explicit ``registry`` always generates afresh and leaves the cache alone.
    """
    entry = _lookup(type_name)
    if registry is not None:
        return generate_artifacts(entry.declaration, registry)
    return entry.generate()


def supamodeled(cls: type) -> type:
    """Class decorator: register the class's table and attach its artifacts.

    The artifacts are available as ``cls.conformer_artifacts``.
    """
    entry = register_table(declaration_from_class(cls))
    cls.conformer_artifacts = entry.generate()
    return cls


__all__ = [
    "RegisteredTable",
    "register_table",
    "unregister_table",
    "get_table",
    "list_tables",
    "clear_tables",
    "generate_registered",
    "supamodeled",
]

"""
Artifact generation for table declarations.

``generate_artifacts`` is the single entry point: it parses and classifies a
declaration, then runs every emitter over the same ``TableSchema``. A
declaration without a usable columns list never raises; it yields a
``DiagnosticArtifact`` carrying guidance text for the author instead, so a
build running the generator keeps going. The same holds for a type overrides
file that cannot be loaded.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from conformer.config import get_settings
from conformer.errors import SchemaDeclarationError, SchemaLoaderError
from conformer.infrastructure.schema.builder import build_table_schema
from conformer.infrastructure.schema.core import TableDeclaration, TableSchema
from conformer.infrastructure.schema.ddl_generator import generate_create_table_ddl
from conformer.infrastructure.schema.type_registry import TypeRegistry, get_type_registry
from conformer.utils.logging import get_logger

from .fields import (
    FieldDeclaration,
    RelationshipDescriptor,
    generate_field_declarations,
    generate_relationships,
)
from .serialization_keys import generate_serialization_keys, render_serialization_keys
from .sync_query import SyncQueryTemplate, generate_sync_query

logger = get_logger(__name__)

DIAGNOSTIC_MESSAGE = (
    "MARK: Add the variable columns to your table. "
    "columns: [ * Add each column in your table to the list * ]"
)

TYPE_REGISTRY_MESSAGE = (
    "MARK: The value-type registry could not be loaded. "
    "Check the type overrides file."
)

ARTIFACT_SECTIONS = ("fields", "keys", "ddl", "relationships", "sync")


@dataclass(frozen=True)
class TableArtifacts:
    """Everything generated for one table."""

    schema: TableSchema
    field_declarations: List[FieldDeclaration]
    serialization_keys: List[Tuple[str, str]]
    table_definition: str
    relationships: List[RelationshipDescriptor]
    sync_query: SyncQueryTemplate

    is_placeholder = False

    @property
    def coding_keys(self) -> Dict[str, str]:
        return dict(self.serialization_keys)

    def section(self, name: str) -> str:
        """Render a single artifact by section name."""
        if name == "fields":
            return "\n".join(f.render() for f in self.field_declarations)
        if name == "keys":
            return render_serialization_keys(self.serialization_keys)
        if name == "ddl":
            return self.table_definition
        if name == "relationships":
            return "\n".join(r.render() for r in self.relationships)
        if name == "sync":
            return self.sync_query.template
        raise KeyError(f"Unknown artifact section '{name}'. Available: {list(ARTIFACT_SECTIONS)}")

    def render(self) -> str:
        parts: List[str] = [f"# {self.schema.type_name} ({self.schema.table_name})"]
        for name in ARTIFACT_SECTIONS:
            body = self.section(name)
            if body:
                parts.append("")
                parts.append(f"## {name}")
                parts.append(body)
        return "\n".join(parts)


@dataclass(frozen=True)
class DiagnosticArtifact:
    """Placeholder emitted in place of artifacts for a malformed declaration."""

    type_name: str
    message: str = DIAGNOSTIC_MESSAGE
    details: List[str] = field(default_factory=list)

    is_placeholder = True

    def section(self, name: str) -> str:
        return self.render()

    def render(self) -> str:
        return "\n".join([f"# {self.type_name}", self.message, *self.details])


GeneratedArtifact = Union[TableArtifacts, DiagnosticArtifact]


def build_artifacts(
    schema: TableSchema,
    registry: TypeRegistry,
    if_not_exists: bool = True,
) -> TableArtifacts:
    """Run every emitter over an already-built schema; never raises.

    The type registry must already be loaded; ``generate_artifacts`` resolves
    the configured one before calling this.
    """
    return TableArtifacts(
        schema=schema,
        field_declarations=generate_field_declarations(schema),
        serialization_keys=generate_serialization_keys(schema),
        table_definition=generate_create_table_ddl(schema, registry, if_not_exists),
        relationships=generate_relationships(schema),
        sync_query=generate_sync_query(schema),
    )


def generate_artifacts(
    declaration: TableDeclaration,
    registry: Optional[TypeRegistry] = None,
    if_not_exists: Optional[bool] = None,
) -> GeneratedArtifact:
    """
    Generate all artifacts for a table declaration.

    Args:
        declaration: Table declaration from any schema source
        registry: Type registry; the configured process-wide one by default
        if_not_exists: Emit IF NOT EXISTS; taken from settings by default

    Returns:
        TableArtifacts, or a DiagnosticArtifact when the declaration has no
        usable columns list or the type overrides file cannot be loaded
    """
    try:
        schema = build_table_schema(declaration)
    except SchemaDeclarationError as e:
        logger.warning(
            "artifacts.declaration_invalid",
            type_name=declaration.type_name,
            source=declaration.source,
            error=str(e),
        )
        return DiagnosticArtifact(type_name=declaration.type_name, details=[str(e)])

    if registry is None:
        try:
            registry = get_type_registry()
        except SchemaLoaderError as e:
            logger.error(
                "artifacts.type_registry_unavailable",
                type_name=declaration.type_name,
                error=str(e),
            )
            return DiagnosticArtifact(
                type_name=declaration.type_name,
                message=TYPE_REGISTRY_MESSAGE,
                details=[str(e)],
            )

    if if_not_exists is None:
        if_not_exists = get_settings().if_not_exists

    artifacts = build_artifacts(schema, registry, if_not_exists)
    logger.info(
        "artifacts.generated",
        type_name=schema.type_name,
        table=schema.table_name,
        columns=len(schema.columns),
        foreign_keys=len(schema.foreign_keys),
    )
    return artifacts


__all__ = [
    "DIAGNOSTIC_MESSAGE",
    "TYPE_REGISTRY_MESSAGE",
    "ARTIFACT_SECTIONS",
    "TableArtifacts",
    "DiagnosticArtifact",
    "GeneratedArtifact",
    "build_artifacts",
    "generate_artifacts",
]

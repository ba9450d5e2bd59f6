"""Artifact emitters and the registry of declared tables."""

from .artifacts import (
    DiagnosticArtifact,
    TableArtifacts,
    build_artifacts,
    generate_artifacts,
)
from .fields import (
    FieldDeclaration,
    RelationshipDescriptor,
    generate_field_declarations,
    generate_relationships,
)
from .registry import (
    generate_registered,
    get_table,
    list_tables,
    register_table,
    supamodeled,
    unregister_table,
)
from .serialization_keys import generate_serialization_keys
from .sync_query import SyncQueryTemplate, format_cursor, generate_sync_query

__all__ = [
    "TableArtifacts",
    "DiagnosticArtifact",
    "build_artifacts",
    "generate_artifacts",
    "generate_registered",
    "supamodeled",
    "register_table",
    "unregister_table",
    "get_table",
    "list_tables",
    "FieldDeclaration",
    "RelationshipDescriptor",
    "generate_field_declarations",
    "generate_relationships",
    "generate_serialization_keys",
    "SyncQueryTemplate",
    "format_cursor",
    "generate_sync_query",
]

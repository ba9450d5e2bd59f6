"""Conformer: generate persistence and sync artifacts from table declarations.

Usage:
    >>> from conformer import ForeignKeyColumn, TableColumn, supamodeled
    >>> @supamodeled
    ... class TaskThing:
    ...     table_name = "task_thing"
    ...     columns = [
    ...         TableColumn("id", "String", is_primary_key=True),
    ...         ForeignKeyColumn("otherThing", "BlankThing", "id", "blank_thing_id"),
    ...     ]
    >>> print(TaskThing.conformer_artifacts.table_definition)  # doctest: +SKIP
"""

from conformer.codegen import (
    DiagnosticArtifact,
    TableArtifacts,
    generate_artifacts,
    supamodeled,
)
from conformer.errors import ConformerError, SchemaDeclarationError, SchemaLoaderError
from conformer.infrastructure.schema import (
    ColumnDescriptor,
    ForeignKeyColumn,
    StorageKind,
    TableColumn,
    TableDeclaration,
    TableSchema,
    TypeRegistry,
    build_table_schema,
    load_schema_file,
)
from conformer.utils.naming import camel_to_snake, snake_to_camel

__version__ = "0.1.0"

__all__ = [
    "ConformerError",
    "SchemaDeclarationError",
    "SchemaLoaderError",
    "ColumnDescriptor",
    "TableDeclaration",
    "TableSchema",
    "StorageKind",
    "TypeRegistry",
    "TableColumn",
    "ForeignKeyColumn",
    "build_table_schema",
    "load_schema_file",
    "generate_artifacts",
    "supamodeled",
    "TableArtifacts",
    "DiagnosticArtifact",
    "camel_to_snake",
    "snake_to_camel",
]

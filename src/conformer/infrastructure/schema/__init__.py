"""Table schema model for Conformer.

- core.py: Type definitions (StorageKind, ColumnDescriptor, TableSchema, ...)
- parser.py / builder.py: declaration parsing and column classification
- type_registry.py: value-type token to storage kind registry
- ddl_generator.py: CREATE TABLE generation
- loader.py: YAML, mapping and class-reflection schema sources
"""

from .builder import build_column, build_table_schema
from .core import (
    ColumnDescriptor,
    RawColumnDeclaration,
    StorageKind,
    TableDeclaration,
    TableSchema,
)
from .ddl_generator import generate_create_table_ddl, generate_create_table_sql
from .declarations import ForeignKeyColumn, TableColumn
from .loader import declaration_from_class, declaration_from_mapping, load_schema_file
from .parser import parse_column_declarations
from .type_registry import TypeRegistry, get_type_registry, map_storage_kind

__all__ = [
    "StorageKind",
    "RawColumnDeclaration",
    "TableDeclaration",
    "ColumnDescriptor",
    "TableSchema",
    "TableColumn",
    "ForeignKeyColumn",
    "parse_column_declarations",
    "build_column",
    "build_table_schema",
    "TypeRegistry",
    "get_type_registry",
    "map_storage_kind",
    "generate_create_table_ddl",
    "generate_create_table_sql",
    "declaration_from_class",
    "declaration_from_mapping",
    "load_schema_file",
]

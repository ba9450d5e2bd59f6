"""
Schema loaders.

Every loader returns ``TableDeclaration`` values and leaves the columns list
untouched; parsing and classification happen in the generator so that a
table with a malformed columns list still yields a diagnostic artifact.

Schema file layout::

    tables:
      - type_name: TaskThing
        table_name: task_thing
        columns:
          - {name: id, valueType: String, isPrimaryKey: true}
          - [createdAt, Date?]
          - ForeignKeyColumn:
              name: otherThing
              valueType: BlankThing
              sourceColumn: id
              targetColumn: blank_thing_id
"""

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from conformer.errors import SchemaLoaderError
from conformer.utils.logging import get_logger

from .core import TableDeclaration

logger = get_logger(__name__)


class TableDeclarationModel(BaseModel):
    """Schema for a single table entry."""

    model_config = ConfigDict(extra="ignore")

    type_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("type_name", "typeName", "type"),
        description="Name of the generated record type",
    )
    table_name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("table_name", "tableName", "table"),
        description="Storage table name; defaults to the snake_case type name",
    )
    columns: Optional[Any] = Field(None, description="Ordered column declarations")

    def to_declaration(self, source: Optional[str] = None) -> TableDeclaration:
        return TableDeclaration(
            type_name=self.type_name,
            table_name=self.table_name or None,
            columns=self.columns,
            source=source,
        )


class SchemaFileModel(BaseModel):
    """Schema for a complete schema file."""

    tables: List[TableDeclarationModel] = Field(
        ..., min_length=1, description="Table declarations"
    )


def declaration_from_mapping(
    data: Mapping[str, Any], source: Optional[str] = None
) -> TableDeclaration:
    """
    Build a table declaration from a plain mapping.

    Raises:
        SchemaLoaderError: If the mapping has no usable type name
    """
    try:
        model = TableDeclarationModel.model_validate(dict(data))
    except ValidationError as e:
        raise SchemaLoaderError(f"Invalid table declaration: {e}")
    return model.to_declaration(source)


def declaration_from_class(cls: type) -> TableDeclaration:
    """
    Build a table declaration by reflecting over a class.

    The class provides ``table_name`` (or ``tableName``) and ``columns``;
    ``columns`` may be a list or a zero-argument callable returning one.
    """
    table_name = getattr(cls, "table_name", None) or getattr(cls, "tableName", None)
    columns = getattr(cls, "columns", None)
    if callable(columns):
        columns = columns()
    return TableDeclaration(
        type_name=cls.__name__,
        table_name=table_name,
        columns=columns,
        source=f"{cls.__module__}.{cls.__qualname__}",
    )


def load_schema_file(path: Union[str, Path]) -> List[TableDeclaration]:
    """
    Load table declarations from a YAML schema file.

    Args:
        path: Path to the schema file

    Returns:
        Table declarations in file order

    Raises:
        SchemaLoaderError: If the file cannot be read, is not valid YAML, or
            does not match the schema file layout
    """
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaLoaderError(f"Schema file not found: {path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("schema.yaml_parse_error", path=str(schema_path), error=str(e))
        raise SchemaLoaderError(f"Invalid YAML in schema file: {e}")
    except OSError as e:
        raise SchemaLoaderError(f"Failed to read schema file: {e}")

    if not isinstance(data, dict):
        raise SchemaLoaderError("Schema file must be a mapping with a 'tables' list")

    try:
        model = SchemaFileModel.model_validate(data)
    except ValidationError as e:
        logger.error("schema.validation_failed", path=str(schema_path), error=str(e))
        raise SchemaLoaderError(f"Schema file validation failed: {e}")

    declarations = [table.to_declaration(str(schema_path)) for table in model.tables]
    logger.info(
        "schema.loaded",
        path=str(schema_path),
        tables=[d.type_name for d in declarations],
    )
    return declarations


__all__ = [
    "TableDeclarationModel",
    "SchemaFileModel",
    "declaration_from_mapping",
    "declaration_from_class",
    "load_schema_file",
]

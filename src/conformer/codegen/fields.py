"""Field declaration and relationship emitters."""

from dataclasses import dataclass
from typing import List

from conformer.infrastructure.schema.core import NULLABILITY_MARKER, TableSchema
from conformer.utils.naming import camel_to_snake

# Foreign keys are stored locally as optional text references
FOREIGN_KEY_FIELD_TYPE = f"String{NULLABILITY_MARKER}"


@dataclass(frozen=True)
class FieldDeclaration:
    """A field of the generated record type."""

    name: str
    type_annotation: str
    storage_key: str

    def render(self) -> str:
        return f"{self.name}: {self.type_annotation}"


@dataclass(frozen=True)
class RelationshipDescriptor:
    """A foreign-key accessor, keyed by the declared name.

    Attributes:
        name: Accessor name as declared (``otherThing``)
        target_type: Referenced record type (``BlankThing``)
        target_table: Referenced storage table (``blank_thing``)
        source_column: Referenced column in the target table
        local_column: Local storage column holding the reference
    """

    name: str
    target_type: str
    target_table: str
    source_column: str
    local_column: str

    def render(self) -> str:
        return (
            f"{self.name} -> {self.target_type} "
            f"({self.local_column} references {self.target_table}.{self.source_column})"
        )


def generate_field_declarations(schema: TableSchema) -> List[FieldDeclaration]:
    """One field per plain column plus one local alias field per foreign key."""
    fields: List[FieldDeclaration] = []
    for col in schema.columns:
        type_annotation = FOREIGN_KEY_FIELD_TYPE if col.is_foreign_key else col.declared_type
        fields.append(FieldDeclaration(col.field_name, type_annotation, col.storage_name))
    return fields


def generate_relationships(schema: TableSchema) -> List[RelationshipDescriptor]:
    return [
        RelationshipDescriptor(
            name=col.name,
            target_type=col.source_table or "",
            target_table=camel_to_snake(col.source_table or ""),
            source_column=camel_to_snake(col.source_column or ""),
            local_column=col.storage_name,
        )
        for col in schema.foreign_keys
    ]


__all__ = [
    "FOREIGN_KEY_FIELD_TYPE",
    "FieldDeclaration",
    "RelationshipDescriptor",
    "generate_field_declarations",
    "generate_relationships",
]

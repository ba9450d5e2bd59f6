"""
Unit tests for CREATE TABLE generation.
"""

from __future__ import annotations

from conformer.infrastructure.schema.builder import build_table_schema
from conformer.infrastructure.schema.core import TableDeclaration
from conformer.infrastructure.schema.ddl_generator import (
    RESERVED_COLUMN_CLAUSES,
    generate_column_clauses,
    generate_create_table_ddl,
    generate_create_table_sql,
    primary_key_clause,
)
from conformer.infrastructure.schema.type_registry import TypeRegistry


def _schema(columns, type_name: str = "Thing", table_name: str = "thing"):
    return build_table_schema(
        TableDeclaration(type_name=type_name, table_name=table_name, columns=columns)
    )


class TestTaskThingDDL:
    """The TaskThing example end to end."""

    def test_full_statement(self, task_thing_declaration) -> None:
        ddl = generate_create_table_ddl(build_table_schema(task_thing_declaration))
        assert ddl == "\n".join(
            [
                "CREATE TABLE IF NOT EXISTS task_thing (",
                "  id TEXT NOT NULL,",
                "  name TEXT NOT NULL,",
                "  created_at DATETIME,",
                "  blank_thing_id TEXT REFERENCES blank_thing(id) ON DELETE CASCADE,",
                "  updated_at DATETIME,",
                "  is_deleted BOOLEAN NOT NULL,",
                "  PRIMARY KEY (id)",
                ");",
            ]
        )

    def test_without_if_not_exists(self, task_thing_declaration) -> None:
        ddl = generate_create_table_ddl(
            build_table_schema(task_thing_declaration), if_not_exists=False
        )
        assert ddl.startswith("CREATE TABLE task_thing (")

    def test_sql_document_has_header(self, task_thing_declaration) -> None:
        sql = generate_create_table_sql(build_table_schema(task_thing_declaration))
        assert sql.splitlines()[0] == "-- DDL for table: task_thing (TaskThing)"


class TestReservedColumns:
    """Reserved columns are appended regardless of the schema."""

    def test_empty_schema_still_has_reserved_columns(self) -> None:
        clauses = generate_column_clauses(_schema([]))
        assert clauses == [
            "updated_at DATETIME",
            "is_deleted BOOLEAN NOT NULL",
        ]

    def test_reserved_columns_appear_exactly_once(self, task_thing_declaration) -> None:
        clauses = generate_column_clauses(build_table_schema(task_thing_declaration))
        for reserved in RESERVED_COLUMN_CLAUSES:
            assert clauses.count(reserved) == 1

    def test_author_declared_reserved_columns_not_repeated(self) -> None:
        ddl = generate_create_table_ddl(
            _schema([["id", "String"], ["updatedAt", "Date?"], ["isDeleted", "Bool"]])
        )
        assert ddl.count("updated_at ") == 1
        assert ddl.count("is_deleted ") == 1

    def test_columns_sharing_storage_name_emitted_once(self) -> None:
        clauses = generate_column_clauses(
            _schema([["createdAt", "Date"], ["created_at", "Date"]])
        )
        assert clauses.count("created_at DATETIME NOT NULL") == 1


class TestPrimaryKey:
    """Composite primary key handling."""

    def test_no_primary_key_omits_clause(self) -> None:
        schema = _schema([["id", "String"], ["name", "String"]])
        assert primary_key_clause(schema) is None
        assert "PRIMARY KEY" not in generate_create_table_ddl(schema)

    def test_composite_key_in_declaration_order(self) -> None:
        schema = _schema(
            [
                {"name": "tenantId", "valueType": "String", "isPrimaryKey": True},
                {"name": "name", "valueType": "String"},
                {"name": "itemNumber", "valueType": "Int", "isPrimaryKey": True},
            ]
        )
        assert primary_key_clause(schema) == "PRIMARY KEY (tenant_id, item_number)"

    def test_foreign_key_never_in_primary_key(self) -> None:
        schema = _schema(
            [
                {"name": "id", "valueType": "String", "isPrimaryKey": True},
                {
                    "name": "owner",
                    "valueType": "User",
                    "sourceColumn": "id",
                    "targetColumn": "user_id",
                    "isPrimaryKey": True,
                },
            ]
        )
        assert primary_key_clause(schema) == "PRIMARY KEY (id)"


class TestColumnClauses:
    """Per-column rendering."""

    def test_types_and_nullability(self) -> None:
        schema = _schema(
            [
                ["count", "Int"],
                ["ratio", "Double?"],
                ["score", "Float"],
                ["active", "Bool"],
                ["payload", "Data?"],
                ["extra", "UUID"],
            ]
        )
        assert generate_column_clauses(schema)[:6] == [
            "count INTEGER NOT NULL",
            "ratio DOUBLE",
            "score REAL NOT NULL",
            "active BOOLEAN NOT NULL",
            "payload BLOB",
            "extra ANY NOT NULL",
        ]

    def test_custom_registry(self) -> None:
        registry = TypeRegistry()
        registry.register("UUID", "text")
        schema = _schema([["extra", "UUID"]])
        assert generate_column_clauses(schema, registry)[0] == "extra TEXT NOT NULL"

    def test_foreign_key_defaults_target_to_source(self) -> None:
        schema = _schema([{"name": "owner", "valueType": "UserProfile", "sourceColumn": "profileId"}])
        assert generate_column_clauses(schema)[0] == (
            "profile_id TEXT REFERENCES user_profile(profile_id) ON DELETE CASCADE"
        )

    def test_reserved_word_column_quoted(self) -> None:
        schema = _schema([["order", "Int"]])
        assert generate_column_clauses(schema)[0] == '"order" INTEGER NOT NULL'

    def test_columns_follow_declaration_order(self) -> None:
        schema = _schema(
            [
                {"name": "owner", "valueType": "User", "sourceColumn": "id", "targetColumn": "user_id"},
                ["title", "String"],
            ]
        )
        clauses = generate_column_clauses(schema)
        assert clauses[0].startswith("user_id TEXT REFERENCES")
        assert clauses[1] == "title TEXT NOT NULL"

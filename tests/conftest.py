"""Pytest configuration shared by the Conformer test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from conformer.config import get_settings
from conformer.infrastructure.schema.core import TableDeclaration
from conformer.codegen.registry import clear_tables
from conformer.infrastructure.schema.type_registry import reset_type_registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test with empty registries and default settings."""
    for var in (
        "CONFORMER_LOG_LEVEL",
        "CONFORMER_LOG_JSON",
        "CONFORMER_IF_NOT_EXISTS",
        "CONFORMER_TYPE_OVERRIDES_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    reset_type_registry()
    clear_tables()
    yield
    get_settings.cache_clear()
    reset_type_registry()
    clear_tables()


@pytest.fixture
def tasks_schema_path() -> Path:
    return FIXTURES_DIR / "schemas" / "tasks.yml"


@pytest.fixture
def task_thing_declaration() -> TableDeclaration:
    """The TaskThing table: primary key, optional date and one foreign key."""
    return TableDeclaration(
        type_name="TaskThing",
        table_name="task_thing",
        columns=[
            {"name": "id", "valueType": "String", "isPrimaryKey": True},
            {"name": "name", "valueType": "String"},
            {"name": "createdAt", "valueType": "Date?"},
            {
                "ForeignKeyColumn": {
                    "name": "otherThing",
                    "valueType": "BlankThing",
                    "sourceColumn": "id",
                    "targetColumn": "blank_thing_id",
                }
            },
        ],
    )

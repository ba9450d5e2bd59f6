"""
Unit tests for the value-type token registry.
"""

from __future__ import annotations

import pytest

from conformer.config import get_settings
from conformer.errors import SchemaLoaderError
from conformer.infrastructure.schema.core import StorageKind
from conformer.infrastructure.schema.type_registry import (
    DEFAULT_TYPE_TOKENS,
    TypeRegistry,
    get_type_registry,
    load_type_overrides,
    map_storage_kind,
    reset_type_registry,
)


class TestDefaultMapping:
    """The default registry covers the fixed mapping table."""

    @pytest.mark.parametrize(
        "token, kind",
        [
            ("String", StorageKind.TEXT),
            ("Int", StorageKind.INTEGER),
            ("Int32", StorageKind.INTEGER),
            ("Int64", StorageKind.INTEGER),
            ("Double", StorageKind.DOUBLE),
            ("Float", StorageKind.REAL),
            ("Bool", StorageKind.BOOLEAN),
            ("Data", StorageKind.BLOB),
            ("Date", StorageKind.DATETIME),
            ("str", StorageKind.TEXT),
            ("float", StorageKind.DOUBLE),
            ("datetime", StorageKind.DATETIME),
        ],
    )
    def test_known_tokens(self, token, kind) -> None:
        assert map_storage_kind(token) == kind

    def test_nullability_marker_ignored(self) -> None:
        assert map_storage_kind("Date?") == StorageKind.DATETIME
        assert map_storage_kind("Int ?") == StorageKind.INTEGER

    @pytest.mark.parametrize("token", ["UUID", "BlankThing", "", "[String]"])
    def test_unknown_tokens_map_to_any(self, token) -> None:
        assert map_storage_kind(token) == StorageKind.ANY

    def test_mapping_is_total_over_storage_kinds(self) -> None:
        for token in list(DEFAULT_TYPE_TOKENS) + ["Whatever"]:
            assert map_storage_kind(token) in set(StorageKind)

    def test_sql_rendering(self) -> None:
        assert StorageKind.TEXT.sql == "TEXT"
        assert StorageKind.DATETIME.sql == "DATETIME"
        assert StorageKind.ANY.sql == "ANY"


class TestTypeRegistry:
    """Registry extension."""

    def test_register_new_token(self) -> None:
        registry = TypeRegistry()
        registry.register("UUID", StorageKind.TEXT)
        assert "UUID" in registry
        assert registry.resolve("UUID?") == StorageKind.TEXT

    def test_register_accepts_kind_name(self) -> None:
        registry = TypeRegistry()
        registry.register("Decimal", "double")
        assert registry.resolve("Decimal") == StorageKind.DOUBLE

    def test_conflicting_registration_requires_replace(self) -> None:
        registry = TypeRegistry()
        with pytest.raises(ValueError) as exc_info:
            registry.register("String", StorageKind.BLOB)
        assert "already registered" in str(exc_info.value)

        registry.register("String", StorageKind.BLOB, replace=True)
        assert registry.resolve("String") == StorageKind.BLOB

    def test_same_registration_is_idempotent(self) -> None:
        registry = TypeRegistry()
        registry.register("String", StorageKind.TEXT)
        assert registry.resolve("String") == StorageKind.TEXT

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValueError):
            TypeRegistry().register(" ", StorageKind.TEXT)

    def test_unregister(self) -> None:
        registry = TypeRegistry()
        registry.unregister("Data")
        assert registry.resolve("Data") == StorageKind.ANY
        with pytest.raises(KeyError):
            registry.unregister("Data")

    def test_copy_is_independent(self) -> None:
        registry = TypeRegistry()
        clone = registry.copy()
        clone.register("UUID", StorageKind.TEXT)
        assert "UUID" not in registry

    def test_empty_registry_is_used_as_given(self) -> None:
        """An explicitly empty registry maps everything to any."""
        assert map_storage_kind("String", TypeRegistry({})) == StorageKind.ANY


class TestTypeOverrides:
    """Overrides loaded from YAML."""

    def test_load_overrides(self, tmp_path) -> None:
        path = tmp_path / "types.yml"
        path.write_text("UUID: text\nDecimal: DOUBLE\n", encoding="utf-8")
        assert load_type_overrides(path) == {
            "UUID": StorageKind.TEXT,
            "Decimal": StorageKind.DOUBLE,
        }

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(SchemaLoaderError):
            load_type_overrides(tmp_path / "missing.yml")

    def test_unknown_kind(self, tmp_path) -> None:
        path = tmp_path / "types.yml"
        path.write_text("UUID: varchar\n", encoding="utf-8")
        with pytest.raises(SchemaLoaderError) as exc_info:
            load_type_overrides(path)
        assert "varchar" in str(exc_info.value)

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "types.yml"
        path.write_text("- UUID\n", encoding="utf-8")
        with pytest.raises(SchemaLoaderError):
            load_type_overrides(path)

    def test_settings_overrides_applied_to_default_registry(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "types.yml"
        path.write_text("UUID: text\n", encoding="utf-8")
        monkeypatch.setenv("CONFORMER_TYPE_OVERRIDES_FILE", str(path))
        get_settings.cache_clear()
        reset_type_registry()

        assert get_type_registry().resolve("UUID") == StorageKind.TEXT
        assert map_storage_kind("UUID") == StorageKind.TEXT

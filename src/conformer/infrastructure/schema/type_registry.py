"""Value-type token registry.

Maps the author-facing value-type tokens (``String``, ``Int64``, ``Date``,
...) to storage kinds. The registry is open: projects register their own
tokens, or list them in a YAML file named by ``CONFORMER_TYPE_OVERRIDES_FILE``.
Resolution is total; unknown tokens map to ``StorageKind.ANY``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

import yaml

from conformer.errors import SchemaLoaderError
from conformer.utils.logging import get_logger

from .core import StorageKind, strip_nullability

logger = get_logger(__name__)

DEFAULT_TYPE_TOKENS: Dict[str, StorageKind] = {
    "String": StorageKind.TEXT,
    "Substring": StorageKind.TEXT,
    "Character": StorageKind.TEXT,
    "str": StorageKind.TEXT,
    "Int": StorageKind.INTEGER,
    "Int32": StorageKind.INTEGER,
    "Int64": StorageKind.INTEGER,
    "int": StorageKind.INTEGER,
    "Double": StorageKind.DOUBLE,
    "float": StorageKind.DOUBLE,
    "Float": StorageKind.REAL,
    "Float32": StorageKind.REAL,
    "Bool": StorageKind.BOOLEAN,
    "bool": StorageKind.BOOLEAN,
    "Data": StorageKind.BLOB,
    "bytes": StorageKind.BLOB,
    "Date": StorageKind.DATETIME,
    "datetime": StorageKind.DATETIME,
}


class TypeRegistry:
    """Mutable mapping from value-type token to storage kind."""

    def __init__(self, tokens: Optional[Mapping[str, StorageKind]] = None):
        self._tokens: Dict[str, StorageKind] = dict(
            DEFAULT_TYPE_TOKENS if tokens is None else tokens
        )

    def register(
        self, token: str, kind: Union[StorageKind, str], replace: bool = False
    ) -> None:
        """Register a token. Re-registering needs ``replace=True``."""
        if not token or not token.strip():
            raise ValueError("Type token must be a non-empty string")
        storage_kind = StorageKind(kind) if isinstance(kind, str) else kind
        if token in self._tokens and not replace and self._tokens[token] != storage_kind:
            raise ValueError(
                f"Type token '{token}' is already registered as "
                f"'{self._tokens[token].value}'. Pass replace=True to override."
            )
        self._tokens[token] = storage_kind

    def unregister(self, token: str) -> None:
        if token not in self._tokens:
            raise KeyError(f"Type token '{token}' is not registered")
        del self._tokens[token]

    def update(self, tokens: Mapping[str, Union[StorageKind, str]]) -> None:
        for token, kind in tokens.items():
            self.register(token, kind, replace=True)

    def resolve(self, declared_type: str) -> StorageKind:
        value_type, _ = strip_nullability(declared_type)
        return self._tokens.get(value_type, StorageKind.ANY)

    def tokens(self) -> List[str]:
        return sorted(self._tokens)

    def copy(self) -> "TypeRegistry":
        return TypeRegistry(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)


def load_type_overrides(path: Union[str, Path]) -> Dict[str, StorageKind]:
    """
    Load extra type tokens from a YAML mapping of ``token: storage_kind``.

    Raises:
        SchemaLoaderError: If the file is missing, unreadable or malformed
    """
    config_path = Path(path)
    if not config_path.exists():
        raise SchemaLoaderError(f"Type overrides file not found: {path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SchemaLoaderError(f"Invalid YAML in type overrides: {e}")

    if not isinstance(data, dict):
        raise SchemaLoaderError("Type overrides must be a mapping of token to kind")

    overrides: Dict[str, StorageKind] = {}
    valid_kinds = ", ".join(kind.value for kind in StorageKind)
    for token, kind in data.items():
        if not isinstance(token, str) or not isinstance(kind, str):
            raise SchemaLoaderError(
                f"Type override entries must be strings, got {token!r}: {kind!r}"
            )
        try:
            overrides[token] = StorageKind(kind.lower())
        except ValueError:
            raise SchemaLoaderError(
                f"Unknown storage kind '{kind}' for token '{token}'. "
                f"Expected one of: {valid_kinds}"
            )

    logger.debug("types.overrides_loaded", path=str(config_path), count=len(overrides))
    return overrides


_DEFAULT_REGISTRY: Optional[TypeRegistry] = None


def get_type_registry() -> TypeRegistry:
    """Process-wide registry: defaults plus the configured overrides file."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        from conformer.config import get_settings

        registry = TypeRegistry()
        overrides_file = get_settings().type_overrides_file
        if overrides_file is not None:
            registry.update(load_type_overrides(overrides_file))
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


def reset_type_registry() -> None:
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = None


def map_storage_kind(
    declared_type: str, registry: Optional[TypeRegistry] = None
) -> StorageKind:
    """Map a declared value type to its storage kind; never fails."""
    active = registry if registry is not None else get_type_registry()
    return active.resolve(declared_type)


__all__ = [
    "DEFAULT_TYPE_TOKENS",
    "TypeRegistry",
    "load_type_overrides",
    "get_type_registry",
    "reset_type_registry",
    "map_storage_kind",
]

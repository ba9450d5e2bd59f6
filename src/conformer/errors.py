"""Exception types raised by Conformer.

Only two things can go wrong while generating artifacts for a table:

- the table declaration has no recognisable columns list
  (``SchemaDeclarationError``), which ``generate_artifacts`` turns into a
  diagnostic placeholder instead of failing the caller's build;
- a schema file cannot be read or does not have the expected shape
  (``SchemaLoaderError``), which is reported to the caller.

Individual malformed column entries are not errors; they are skipped.
"""

from typing import Optional


class ConformerError(Exception):
    """Base class for all Conformer errors."""

    pass


class SchemaDeclarationError(ConformerError):
    """Raised when a table declaration lacks a usable columns list."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        super().__init__(message)
        self.type_name = type_name


class SchemaLoaderError(ConformerError):
    """Raised when a schema source cannot be loaded or validated."""

    pass


__all__ = [
    "ConformerError",
    "SchemaDeclarationError",
    "SchemaLoaderError",
]

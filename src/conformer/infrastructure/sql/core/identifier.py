"""
SQL identifier handling utilities.

Generated identifiers are snake_case and usually need no quoting; anything
else (upper-case letters, spaces, non-ASCII, keywords) is double-quoted so
the emitted statement stays valid.
"""

import re

_BARE_IDENTIFIER = re.compile(r"[a-z_][a-z0-9_]*\Z")

# Keywords a generated column name could plausibly collide with
RESERVED_WORDS = frozenset(
    {
        "all", "and", "as", "check", "column", "constraint", "create", "default",
        "delete", "distinct", "drop", "foreign", "from", "group", "in", "index",
        "insert", "into", "is", "key", "not", "null", "on", "or", "order",
        "primary", "references", "select", "set", "table", "to", "union",
        "unique", "update", "values", "where",
    }
)


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier when it is not a plain lower-case identifier.

    Examples:
        >>> quote_identifier("created_at")
        'created_at'
        >>> quote_identifier("order")
        '"order"'
        >>> quote_identifier('column"name')
        '"column""name"'
    """
    if _BARE_IDENTIFIER.fullmatch(name) and name not in RESERVED_WORDS:
        return name
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def quote_identifiers(names) -> str:
    """Comma-separated list of quoted identifiers."""
    return ", ".join(quote_identifier(n) for n in names)


__all__ = ["quote_identifier", "quote_identifiers", "RESERVED_WORDS"]

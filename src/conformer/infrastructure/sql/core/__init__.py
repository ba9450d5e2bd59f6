"""Core SQL utilities package."""

from .identifier import quote_identifier, quote_identifiers

__all__ = [
    "quote_identifier",
    "quote_identifiers",
]

"""
SQL module for identifier handling in generated statements.
"""

from .core.identifier import quote_identifier, quote_identifiers

__all__ = [
    "quote_identifier",
    "quote_identifiers",
]

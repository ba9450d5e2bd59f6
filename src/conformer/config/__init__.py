"""Configuration management for Conformer.

Usage:
    >>> from conformer.config import get_settings
    >>> settings = get_settings()
    >>> settings.if_not_exists
    True
"""

from conformer.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]

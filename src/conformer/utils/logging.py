"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs (console rendering when disabled)

Configuration is loaded from conformer.config.settings:
- CONFORMER_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- CONFORMER_LOG_JSON: Render JSON (1, true, yes). Default: enabled

Usage:
    >>> from conformer.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("artifacts.generated", table="task_thing", columns=4)
"""

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

from conformer.config import get_settings


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().LOG_LEVEL
    except Exception:
        # Invalid settings must not stop logging from working
        level_name = os.getenv("CONFORMER_LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _use_json_renderer() -> bool:
    try:
        return get_settings().log_json
    except Exception:
        return os.getenv("CONFORMER_LOG_JSON", "true").lower() in ("1", "true", "yes")


def _configure_structlog() -> None:
    """Configure structlog on top of stdlib logging.

    Logs go to stderr so generated artifacts printed on stdout stay clean.
    """
    level = _get_log_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    root = logging.getLogger("conformer")
    root.handlers = [handler]
    root.setLevel(level)

    renderer: Processor
    if _use_json_renderer():
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with the project processors
    """
    return structlog.get_logger(name)


__all__ = ["get_logger"]

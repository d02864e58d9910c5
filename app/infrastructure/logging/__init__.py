"""Structured logging for the site (structlog).

Public API:
    - configure_logging(): Configure structlog at startup
    - get_module_logger(): Logger bound with the calling module
    - bind_language_context(): Add the active language to log entries
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    bind_language_context,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_language_context",
]

"""Logging configuration for create-catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, cast

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console", "error_console"]

_DEFAULT_LEVEL_NAME: Final[str] = "WARNING"

console = Console()
error_console = Console(stderr=True)

if TYPE_CHECKING:

    class _ManagedRichHandler(RichHandler):
        _create_catalog_managed: bool

else:
    _ManagedRichHandler = RichHandler


def _resolve_level(level_name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""
    name = (level_name or _DEFAULT_LEVEL_NAME).upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(level_name: str | None = None) -> None:
    """Configure logging once with a Rich handler on stderr."""
    root_logger = logging.getLogger()
    level = _resolve_level(level_name)

    managed_handler: _ManagedRichHandler | None = None
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler) and getattr(handler, "_create_catalog_managed", False):
            managed_handler = cast("_ManagedRichHandler", handler)
            break

    if managed_handler is None:
        root_logger.handlers.clear()
        handler = _ManagedRichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._create_catalog_managed = True
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    logging.captureWarnings(True)

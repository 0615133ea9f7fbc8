"""Logging configuration for the `blockchaindb` logger tree.

Library modules only call `logging.getLogger(__name__)`; handlers are
installed here, and only entry-points (the CLI) call `configure_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "blockchaindb"


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Attach a single `RichHandler` to the package logger and set its level."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger

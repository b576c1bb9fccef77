"""Logging helpers for consistent console output."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Route the root logger through a stderr :class:`RichHandler`.

    ``config`` defaults to :class:`LoggingConfig`; an unknown ``level`` name
    falls back to ``INFO``. Handlers installed earlier are replaced.
    """

    config = config or LoggingConfig()
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=config.rich_tracebacks)
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


__all__ = ["setup_logging"]

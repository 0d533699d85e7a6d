"""Process-wide logging setup."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_LOGGING_CONFIGURED = False


def resolve_log_level(name: str | None) -> int:
    level_name = (name or os.environ.get("COMPONENT_ANALYZER_LOG_LEVEL") or "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name}")
    return level


def configure_logging(level_name: str | None = None) -> None:
    """Attach a stderr RichHandler to the analyzer logger once."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logger = logging.getLogger("component_analyzer")
    logger.setLevel(resolve_log_level(level_name))
    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.propagate = False
    _LOGGING_CONFIGURED = True

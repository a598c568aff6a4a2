"""Logging setup shared by the CLI and scripts."""
from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_root(level: int | str = LOG_LEVEL) -> None:
    """Reset the root logger to a single stream handler at ``level``."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


__all__ = ["LOG_FORMAT", "configure_root"]

"""Logging utilities built on top of :mod:`loguru`."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger


def setup_logging(log_file: Optional[Path] = None, level: str = "INFO") -> List[int]:
    """Configure the global loguru logger and enable ``timerstats`` records.

    The package is disabled on import, so nothing is written until this is
    called. Timer records are emitted at ``TRACE`` and ``DEBUG``; pass one of
    those levels to see them.

    Args:
        log_file: Optional file path for log sink.
        level: Minimum log level (string understood by loguru).
    Returns:
        Ids of the handlers added.
    """

    logger.remove()
    handlers = [logger.add(sys.stdout, level=level)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logger.add(log_file, level=level, rotation="10 MB", retention="7 days"))
    logger.enable("timerstats")
    return handlers


__all__ = ["setup_logging", "logger"]

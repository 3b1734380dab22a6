"""
Package Sorter — Logging Setup
================================

What:  One place that configures the root logger.
Who:   Called by the FastAPI lifespan (main.py) and by the CLI (cli.py).
Why:   The server logs to stdout (container log capture); the CLI logs to
       stderr so that stdout carries only the decision.
"""

import logging
import sys
from typing import Optional, TextIO

from package_sorter.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the whole process.

    Args:
        level: Level name; defaults to settings.log_level.
        stream: Output stream; defaults to stdout.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

"""Process-wide logging setup, called once by the CLI entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr in a single timestamped format.

    Safe to call more than once; the previous handlers are replaced.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

"""Logging setup shared by the CLI and library callers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# HTTP client libraries log every connection at DEBUG.
_CHATTY_LOGGERS = ("urllib3",)


def configure_logging(
    log_path: Path | None = None,
    level: int = logging.INFO,
    verbose: bool = False,
) -> None:
    """Configure root logging handlers and formatting.

    Args:
        log_path: Optional path to a file where logs will be written; the
            parent directory is created if needed.
        level: Logging level (defaults to INFO).
        verbose: Force DEBUG, e.g. to see circuits dropped for unknown types.
    """
    if verbose:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    logging.getLogger().setLevel(level)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

"""
Logging setup for termcomplete.

Console output always, plus a rotating log file when a directory is
given. Modules log through ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    log_dir: Path | None = None,
    level: int = logging.INFO,
    log_file: str = "termcomplete.log",
) -> logging.Logger:
    """
    Configure the ``termcomplete`` logger hierarchy.

    Args:
        log_dir: Directory for the log file. If None, only console logging is set up.
        level: Minimum log level.
        log_file: Name of the log file.

    Returns the package logger. Repeated calls keep the existing handlers.
    """
    pkg_logger = logging.getLogger("termcomplete")
    pkg_logger.setLevel(level)

    if pkg_logger.handlers:
        return pkg_logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    pkg_logger.addHandler(console)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning("Could not set up file logging: %s", e)

    return pkg_logger

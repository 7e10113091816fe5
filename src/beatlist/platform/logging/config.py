"""Logger bootstrap for the ``beatlist`` logger hierarchy.

Where: platform/logging/config.py
What: Attach the rich console handler and an optional rotating log file.
Why: Every module logs under ``beatlist.*``; the CLI only decides levels and the file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from beatlist.config.paths import default_log_file

from .handlers import ConversionRichHandler

LOGGER_NAME: Final[str] = "beatlist"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
FILE_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _console_handler(level: int) -> ConversionRichHandler:
    # stderr keeps stdout free for the conversion summary
    handler = ConversionRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``beatlist`` logger.

    Existing handlers are closed first, so calling this again (as the CLI
    does once arguments are parsed) replaces the previous setup.

    Args:
        log_file: Rotating log file; console-only when ``None``.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the log file.

    Returns:
        logging.Logger: The configured ``beatlist`` logger.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    configured.addHandler(_console_handler(console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(log_file, file_level))
    return configured


# Console-only until the CLI attaches the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]

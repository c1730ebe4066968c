"""Logging helpers for shellout.

The library only ever logs through the ``shellout`` logger and never installs
handlers on import. Programs that want to see its output call
`setup_logging` once, the way the ``shellout`` CLI does.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "shellout"


class ShellFormatter(logging.Formatter):
    """Formatter that marks every log line as coming from shellout."""

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        return f"🐚 {formatted_message}"


def setup_logging(level: int = logging.INFO) -> None:
    """Send shellout log records to stderr at the given level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    # stdout is reserved for the output of the commands being run
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ShellFormatter(fmt="%(message)s", datefmt=None))
    logger.addHandler(console_handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

"""
Console logging setup.

One stream handler on the root logger, colored by level. Called once by the CLI.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps each line in an ANSI color for its level."""

    COLORS = {
        "DEBUG": "\033[0;96m",  # Cyan
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        log_color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False) -> None:
    """
    Install the colored handler on the root logger.

    Args:
        debug: Log at DEBUG instead of INFO.
    """
    logger = logging.getLogger()

    # Replace existing handlers so repeated calls don't duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter(LOG_FORMAT))

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)

import logging
from datetime import datetime

from swipewise.config import settings

PACKAGE_LOGGER = "swipewise"


class ConsoleFormatter(logging.Formatter):
    """Compact single-line formatter for local runs and test output."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        msg = f"{timestamp} [{record.levelname:8}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            msg += f"\n{self.formatException(record.exc_info)}"
        return msg


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again only updates the level; handlers are never duplicated.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or settings.log_level).upper())

    if not any(getattr(h, "_swipewise_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ConsoleFormatter())
        handler._swipewise_console = True
        logger.addHandler(handler)

    return logger

import enum
import logging
from logging import getLogger as _getLogger
import logging.config
from typing import Any, Optional

from curlbridge.conf import settings


class LogLevel(int, enum.Enum):
    """A convient namespaced list of possible log levels.

    An nicer alternative to doing something like:

    .. code-block:: python

       from curlbridge.logging import DEBUG
       from curlbridge.logging import DEBUG as LOG_LEVEL_DEBUG
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    WARN = logging.WARN
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


LOG_FORMAT: str = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"
LOGGING: dict[str, Any] = {
    "loggers": {
        "": {
            "level": "WARNING",
            "handlers": [
                "console",
            ],
        },
        # Records propagate to the root handler.
        "curlbridge": {
            "level": settings.LOG_LEVEL,
        },
    }
}


class ColorizedFormatter(logging.Formatter):
    """A simple log formatter with colors."""

    COLOR_RESET = "\u001b[0m"

    @staticmethod
    def get_level_color(levelno: int) -> str:
        """Calculate the color based on the log level.

        Args:
            levelno: the log level number.

        Returns:
            A terminal escape sequence for the color.
        """
        if levelno <= 10:
            # DEBUG
            return "\u001b[38;5;14m"
        elif levelno <= 20:
            # INFO
            return "\u001b[38;5;27m"
        elif levelno <= 30:
            # WARNING
            return "\u001b[38;5;214m"
        elif levelno <= 40:
            # ERROR
            return "\u001b[38;5;9m"
        else:
            # CRITICAL
            return "\u001b[38;5;124m"

    def format(self, record):
        """Format the record based on color preferences.

        Args:
            record: The log record to format.
        """
        if not settings.NO_COLOR:
            # Work on a copy so other handlers see the plain level name.
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = "{}{:8}{}".format(
                self.get_level_color(record.levelno),
                record.levelname,
                self.COLOR_RESET,
            )

        return super().format(record)


config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "colorized": {
            "format": LOG_FORMAT,
            "()": ColorizedFormatter,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "colorized",
            "stream": "ext://sys.stderr",
        },
    },
}
config.update(LOGGING)

logging.config.dictConfig(config)

logger = _getLogger("curlbridge")


def getLogger(name: Optional[str]) -> logging.Logger:
    """Create and return a logger.

    This function will copy the log level set on the package logger (see
    ``CURLBRIDGE_LOG_LEVEL``).

    Args:
        name: The name of the logger.

    Returns:
        An object suitable for logging
    """
    new_logger = _getLogger(name)
    new_logger.setLevel(logger.getEffectiveLevel())
    return new_logger

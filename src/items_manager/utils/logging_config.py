"""
Logging configuration for Items Manager.

Everything under the ``items_manager`` logger is emitted at DEBUG and the
handlers decide what is shown: a console stream (optionally coloured) and,
when enabled, a rotating semicolon-separated CSV file.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

APP_LOGGER = "items_manager"
CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

RESET = "\033[0m"
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the first occurrence of the level name."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return formatted
        return formatted.replace(record.levelname, f"{color}{record.levelname}{RESET}", 1)


def _csv_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


class CSVFormatter(logging.Formatter):
    """One ``;``-separated row per record: time, level, uptime, logger, line, message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return ";".join(
            [
                _csv_field(self.formatTime(record, self.datefmt)),
                record.levelname.ljust(8),
                _csv_field(f"{int(record.relativeCreated)} ms"),
                _csv_field(record.name),
                _csv_field(str(record.lineno)),
                _csv_field(message),
            ]
        )


def _console_handler(level_name: str, use_colors: bool) -> logging.Handler:
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    return handler


def _file_handler(log_file: str) -> Optional[logging.Handler]:
    """Create the rotating CSV handler, or return None if the file cannot be opened."""
    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not set up file logging at {log_path}: {e}")
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATEFMT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace the root handlers with the ones enabled in ``settings``.

    Args:
        settings: AppSettings providing the console and file logging options
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG)

    if settings.console_logging:
        root_logger.addHandler(
            _console_handler(settings.console_log_level, settings.console_use_colors)
        )

    file_handler = _file_handler(settings.log_file_path) if settings.file_logging else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if settings.console_logging:
        logger.debug(
            f"Console logging: {settings.console_log_level} "
            f"(colors: {settings.console_use_colors})"
        )
    if file_handler is not None:
        logger.debug(f"File logging: DEBUG at {settings.log_file_absolute_path}")

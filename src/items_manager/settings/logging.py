"""
Logging-related settings for Items Manager.
"""

import logging
from pathlib import Path

from .base import SettingsGroup

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/items_manager.csv"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONSOLE_LEVEL = "INFO"


class LoggingSettings(SettingsGroup):
    """Console and file logging options.

    The file log location is fixed; only whether it is written can change.
    """

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", bool(value))

    @property
    def console_log_level(self) -> str:
        level = self._get_str("logging/console_level", DEFAULT_CONSOLE_LEVEL).upper()
        return level if level in VALID_LEVELS else DEFAULT_CONSOLE_LEVEL

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.strip().upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Ignoring unknown console log level '{value}' "
                f"(expected one of {', '.join(VALID_LEVELS)})"
            )
            return
        self._set("logging/console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", bool(value))

    @property
    def file_logging(self) -> bool:
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", bool(value))

    @property
    def log_file_path(self) -> str:
        """Relative location of the CSV log, resolved against the working directory."""
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(LOG_FILE_PATH).resolve()

"""
Application settings facade for Items Manager.
"""

import logging
from pathlib import Path
from typing import Any, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QMainWindow, QWidget

from .base import SettingsGroup
from .editor import EditorSettings
from .logging import LoggingSettings
from .migration import SettingsMigrator
from .paths import PathSettings
from .types import ConfigVersion, ValidationResult
from .ui import UISettings
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION = "items_manager"
APPLICATION = "items_manager"

SUBSYSTEMS = {
    "paths": PathSettings,
    "editor": EditorSettings,
    "logging": LoggingSettings,
}


def _delegate(subsystem: str, name: str, writable: bool = True) -> property:
    """Expose ``AppSettings.<subsystem>.<name>`` directly on AppSettings."""

    def getter(self: "AppSettings") -> Any:
        return getattr(getattr(self, subsystem), name)

    def setter(self: "AppSettings", value: Any) -> None:
        setattr(getattr(self, subsystem), name, value)

    doc = getattr(SUBSYSTEMS[subsystem], name).__doc__
    return property(getter, setter if writable else None, doc=doc)


class AppSettings(SettingsGroup):
    """
    Typed access to the settings of one profile.

    Settings live in ``items_manager/items_manager`` under a group named after
    the profile, so test runs and alternative setups do not share values.
    Each concern is handled by a subsystem (``paths``, ``ui``, ``editor``,
    ``logging``); the most used values are also available as properties here.
    """

    def __init__(self, profile: str = "default"):
        super().__init__(QSettings(ORGANIZATION, APPLICATION))
        self.profile = profile
        self.settings.beginGroup(profile)

        self.paths = PathSettings(self.settings)
        self.ui = UISettings(self.settings)
        self.editor = EditorSettings(self.settings)
        self.logging = LoggingSettings(self.settings)
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)

        self._migrator.ensure_version()
        logger.debug(f"Settings profile '{profile}' stored at {self.settings.fileName()}")

    # === VERSION AND FIRST RUN ===

    @property
    def version(self) -> str:
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    @property
    def is_first_run(self) -> bool:
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        self._set("app/first_run", False)

    # === DELEGATED VALUES ===

    last_directory = _delegate("paths", "last_directory")
    recent_files = _delegate("paths", "recent_files", writable=False)

    namespace = _delegate("editor", "namespace")
    export_file_name = _delegate("editor", "export_file_name")
    nested_tables = _delegate("editor", "nested_tables")
    key_collision_policy = _delegate("editor", "key_collision_policy")

    console_logging = _delegate("logging", "console_logging")
    console_log_level = _delegate("logging", "console_log_level")
    console_use_colors = _delegate("logging", "console_use_colors")
    file_logging = _delegate("logging", "file_logging")
    log_file_path = _delegate("logging", "log_file_path", writable=False)
    log_file_absolute_path = _delegate("logging", "log_file_absolute_path", writable=False)

    def add_recent_file(self, file_path: Union[str, Path]) -> None:
        self.paths.add_recent_file(file_path)

    def clear_recent_files(self) -> None:
        self.paths.clear_recent_files()

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        self.ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        return self.ui.restore_window_geometry(widget)

    # === VALIDATION AND STORAGE ===

    def validate(self) -> ValidationResult:
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def sync(self) -> None:
        self.settings.sync()

    def reset(self) -> None:
        """Remove every value stored for this profile and stamp it again."""
        self.settings.remove("")
        self.settings.sync()
        self._migrator.ensure_version()
        logger.info(f"Settings profile '{self.profile}' reset")

"""
Configuration version stamping and migration.
"""

import logging
from typing import Callable, Dict, TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


def _rename_key(settings: "QSettings", old: str, new: str) -> None:
    if settings.contains(old):
        if not settings.contains(new):
            settings.setValue(new, settings.value(old))
        settings.remove(old)


def _migrate_pre_1_0(settings: "QSettings") -> None:
    # Early builds kept the namespace and the nesting flag at the top level
    _rename_key(settings, "namespace", "editor/namespace")
    _rename_key(settings, "nested_tables", "editor/nested_tables")


# Stored version -> step bringing it up to the current layout
MIGRATIONS: Dict[str, Callable[["QSettings"], None]] = {
    "0.9": _migrate_pre_1_0,
}


class SettingsMigrator:
    """Keeps the stored configuration at the current version."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp a fresh profile, or migrate one written by an older version."""
        stored = self._get_stored_version()
        current = ConfigVersion.CURRENT.value

        if not stored:
            self.settings.setValue("app/version", current)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif stored != current:
            self._migrate(stored, current)

    def _get_stored_version(self) -> str:
        value = self.settings.value("app/version", "")
        return "" if value is None else str(value)

    def _migrate(self, from_version: str, to_version: str) -> None:
        logger.info(f"Migrating configuration from {from_version} to {to_version}")

        step = MIGRATIONS.get(from_version)
        if step is not None:
            step(self.settings)
        else:
            logger.debug(f"No key changes between {from_version} and {to_version}")

        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()

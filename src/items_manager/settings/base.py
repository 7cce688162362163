"""
Shared accessors for settings subsystems.
"""

from typing import List, Optional, TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

TRUE_STRINGS = ("true", "1", "yes", "on")


class SettingsGroup:
    """Base for a group of related keys stored in one QSettings object.

    QSettings returns strings for most values read back from INI files, so
    every getter normalises the raw value to the expected Python type.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _set(self, key: str, value: Any) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return default if value is None else str(value)

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return default if value is None else bool(value)

    def _get_list(self, key: str, default: Optional[List[str]] = None) -> List[str]:
        value = self.settings.value(key, default or [])
        if isinstance(value, (list, tuple)):
            return ["" if item is None else str(item) for item in cast(list[object], value)]
        # A one-element list is read back from INI files as a bare string
        if isinstance(value, str):
            return [value] if value else []
        return list(default or [])

"""
Editor-related settings for Items Manager: how items files are read and written.
"""

import re

from ..items.types import KeyCollisionPolicy
from ..lua_table.models import DEFAULT_NAMESPACE
from .base import SettingsGroup
from .types import ConfigError

DEFAULT_EXPORT_FILE_NAME = "items.lua"
LUA_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_lua_identifier(value: str) -> bool:
    return LUA_IDENTIFIER.fullmatch(value) is not None


class EditorSettings(SettingsGroup):
    """Namespace, export file name, nesting mode and key collision policy."""

    @property
    def namespace(self) -> str:
        """Lua global that owns the ``Items`` table."""
        return self._get_str("editor/namespace", DEFAULT_NAMESPACE) or DEFAULT_NAMESPACE

    @namespace.setter
    def namespace(self, value: str) -> None:
        value = value.strip()
        if not is_lua_identifier(value):
            raise ConfigError(f"Invalid namespace: '{value}'")
        self._set("editor/namespace", value)

    @property
    def export_file_name(self) -> str:
        return self._get_str("editor/export_file_name", DEFAULT_EXPORT_FILE_NAME)

    @export_file_name.setter
    def export_file_name(self, value: str) -> None:
        self._set("editor/export_file_name", value or DEFAULT_EXPORT_FILE_NAME)

    @property
    def nested_tables(self) -> bool:
        """Whether item blocks may contain nested tables on import."""
        return self._get_bool("editor/nested_tables", False)

    @nested_tables.setter
    def nested_tables(self, value: bool) -> None:
        self._set("editor/nested_tables", bool(value))

    @property
    def key_collision_policy(self) -> KeyCollisionPolicy:
        return KeyCollisionPolicy.from_value(
            self._get_str("editor/key_collision_policy", KeyCollisionPolicy.OVERWRITE.value)
        )

    @key_collision_policy.setter
    def key_collision_policy(self, value: KeyCollisionPolicy) -> None:
        self._set("editor/key_collision_policy", value.value)

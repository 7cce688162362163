"""
Settings validation for Items Manager.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .editor import is_lua_identifier
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Checks stored settings before the editor starts.

    Only a namespace that cannot be written as a Lua global is an error.
    Stale paths are warnings, and vanished recent files are pruned.
    """

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        namespace = self.settings.namespace
        if not is_lua_identifier(namespace):
            errors.append(f"Namespace is not a valid Lua identifier: '{namespace}'")

        export_name = self.settings.export_file_name
        if not export_name.lower().endswith(".lua"):
            warnings.append(f"Export file name does not end with .lua: {export_name}")

        last_directory = self.settings.last_directory
        if last_directory and not last_directory.is_dir():
            warnings.append(f"Last used directory no longer exists: {last_directory}")

        warnings.extend(self._prune_recent_files())

        result = ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
        logger.debug(
            f"Settings validated: {len(errors)} errors, {len(warnings)} warnings"
        )
        return result

    def _prune_recent_files(self) -> List[str]:
        recent = self.settings.recent_files
        existing = [path for path in recent if Path(path).exists()]
        if len(existing) == len(recent):
            return []

        self.settings.paths.recent_files = existing
        return [
            f"Recent file no longer exists: {path}" for path in recent if path not in existing
        ]

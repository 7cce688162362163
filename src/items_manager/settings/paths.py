"""
Remembered locations: the last used directory and recently imported files.
"""

from pathlib import Path
from typing import List, Optional, Union

from .base import SettingsGroup

MAX_RECENT_FILES = 10


class PathSettings(SettingsGroup):
    """Last directory and most-recently-used file list."""

    @property
    def last_directory(self) -> Optional[Path]:
        stored = self._get_str("paths/last_directory")
        return Path(stored) if stored else None

    @last_directory.setter
    def last_directory(self, value: Optional[Path]) -> None:
        self._set("paths/last_directory", str(value) if value else "")

    @property
    def recent_files(self) -> List[str]:
        """Recently imported files, newest first."""
        return self._get_list("paths/recent_files")

    @recent_files.setter
    def recent_files(self, files: List[str]) -> None:
        self._set("paths/recent_files", list(files)[:MAX_RECENT_FILES])

    def add_recent_file(self, file_path: Union[str, Path]) -> None:
        """Move ``file_path`` to the top of the list, keeping at most ten entries."""
        entry = str(file_path)
        self.recent_files = [entry] + [f for f in self.recent_files if f != entry]

    def clear_recent_files(self) -> None:
        self.recent_files = []

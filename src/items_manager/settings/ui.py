"""
Window geometry persistence.
"""

from typing import Any, Optional, Union

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QMainWindow, QWidget

from .base import SettingsGroup


def _to_byte_array(value: Any) -> Optional[QByteArray]:
    """Coerce a stored geometry or state blob to QByteArray."""
    if not value:
        return None
    if isinstance(value, QByteArray):
        return value
    try:
        return QByteArray(bytes(value))
    except (TypeError, ValueError):
        return None


class UISettings(SettingsGroup):
    """Main window geometry and dock/toolbar state."""

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Apply saved geometry and state; returns True if anything was restored."""
        restored = False

        geometry = _to_byte_array(self.settings.value("ui/window_geometry"))
        if geometry is not None:
            restored = widget.restoreGeometry(geometry)

        state = _to_byte_array(self.settings.value("ui/window_state"))
        if state is not None and isinstance(widget, QMainWindow):
            restored = widget.restoreState(state) or restored

        return restored

"""
About dialog for Items Manager.
"""

from typing import Optional
from PySide6.QtWidgets import QMessageBox, QWidget, QApplication
from PySide6.QtCore import Qt


def show_about_dialog(
    version: str,
    namespace: str,
    item_count: int = 0,
    settings_file: str = "",
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show the version, the active namespace and where settings live.

    Args:
        version: Application version string
        namespace: Lua global that owns the Items table
        item_count: Number of items currently loaded
        settings_file: Path of the settings storage
        parent: Parent widget
    """
    lines = [
        f"<h3>Items Manager v{version}</h3>",
        "<p>Reads and writes <code>Namespace.Items = { ... };</code> tables.</p>",
        f"<p>Table: <code>{namespace}.Items</code> ({item_count} items loaded)</p>",
    ]
    if settings_file:
        lines.append(f"<p><small>Settings: {settings_file}</small></p>")

    box = QMessageBox(parent)
    box.setWindowTitle("About Items Manager")
    box.setTextFormat(Qt.TextFormat.RichText)
    box.setText("".join(lines))
    box.setIconPixmap(QApplication.windowIcon().pixmap(64, 64))
    box.exec()

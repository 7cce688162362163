"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction/layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QDialog, QFileDialog, QMessageBox

from .. import __version__
from ..errors import ItemsError, KeyConflictError
from .dialogs import ItemEditorDialog, show_about_dialog

if TYPE_CHECKING:
    from .main_window import MainWindow

LUA_FILTER = "Lua Files (*.lua);;All Files (*)"


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _start_directory(self) -> Path:
        last = self.main_window.settings.last_directory
        return last if last and last.exists() else Path.cwd()

    def import_items(self) -> None:
        """Pick an items file and replace the collection with its contents."""
        mw = self.main_window
        file_path, _ = QFileDialog.getOpenFileName(
            mw, "Import Items", str(self._start_directory()), LUA_FILTER
        )
        if not file_path:
            return

        try:
            summary = mw.service.import_file(file_path)
        except OSError as e:
            self.logger.error(f"Failed to read {file_path}: {e}")
            QMessageBox.critical(mw, "Import Failed", f"Could not read file:\n{e}")
            return

        mw.refresh_items(categories_changed=True)
        if summary.is_empty:
            mw.status_bar.showMessage(f"No items found in {Path(file_path).name}", 5000)
        else:
            mw.status_bar.showMessage(
                f"Imported {summary.item_count} items from {Path(file_path).name}", 5000
            )

    def export_items(self) -> None:
        """Write the collection to a Lua file."""
        mw = self.main_window
        default_path = self._start_directory() / mw.service.default_export_name()
        file_path, _ = QFileDialog.getSaveFileName(
            mw, "Export Items", str(default_path), LUA_FILTER
        )
        if not file_path:
            return

        try:
            mw.service.export_file(file_path)
        except (OSError, ItemsError) as e:
            self.logger.error(f"Failed to export to {file_path}: {e}")
            QMessageBox.critical(mw, "Export Failed", f"Could not export items:\n{e}")
            return

        mw.status_bar.showMessage(f"Exported {len(mw.service.collection)} items", 5000)

    def add_item(self) -> None:
        """Insert a template item and open it in the editor."""
        mw = self.main_window
        collection = mw.service.collection
        key = collection.add_new_item()
        mw.refresh_items()

        if not self._edit(key, title="Add New Item"):
            collection.discard_item(key)
            mw.refresh_items()

    def edit_selected_item(self) -> None:
        """Open the selected item in the editor."""
        key = self.main_window.item_browser.selected_key()
        if key:
            self.edit_item(key)

    def edit_item(self, key: str) -> None:
        """Open ``key`` in the editor."""
        self._edit(key, title="Edit Item")

    def _edit(self, key: str, title: str) -> bool:
        """Run the editor dialog for ``key``; returns True if the item was saved."""
        mw = self.main_window
        collection = mw.service.collection
        record = collection.get(key)
        if record is None:
            return False

        dialog = ItemEditorDialog(record, collection.get_categories(), parent=mw, title=title)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return False

        try:
            new_key = collection.save_item(key, dialog.get_record())
        except KeyConflictError as e:
            self.logger.warning(str(e))
            QMessageBox.warning(mw, "Duplicate Item", str(e))
            return False

        mw.refresh_items()
        mw.status_bar.showMessage(f"Saved item '{new_key}'", 3000)
        return True

    def delete_selected_item(self) -> None:
        """Delete the selected item after confirmation."""
        mw = self.main_window
        key = mw.item_browser.selected_key()
        if not key:
            return

        reply = QMessageBox.question(
            mw,
            "Delete Item",
            f"Delete item '{key}'?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        mw.service.collection.delete_item(key)
        mw.refresh_items()

    def toggle_nested_tables(self, checked: bool) -> None:
        """Persist the nested-table parsing option; applies to the next import."""
        mw = self.main_window
        mw.settings.nested_tables = checked
        mw.service.nested = checked
        mw.status_bar.showMessage(
            f"Nested tables {'enabled' if checked else 'disabled'} for next import", 3000
        )

    def about(self) -> None:
        """Show about dialog."""
        mw = self.main_window
        show_about_dialog(
            version=__version__,
            namespace=mw.service.namespace,
            item_count=len(mw.service.collection),
            settings_file=mw.settings.get_settings_file_path(),
            parent=mw,
        )

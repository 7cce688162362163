"""
Menu and toolbar builder for the main application window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence
import qtawesome as qta  # type: ignore

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar and toolbar."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_actions(self) -> None:
        """Create all actions for menus and toolbar."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_import = QAction(qta.icon("mdi.file-upload"), "&Import items.lua...", mw)  # type: ignore[arg-type]
        mw.action_import.setShortcut(QKeySequence.StandardKey.Open)
        mw.action_import.setStatusTip("Import items from a Lua file")
        mw.action_import.triggered.connect(actions.import_items)

        mw.action_export = QAction(qta.icon("mdi.download"), "&Export items.lua...", mw)  # type: ignore[arg-type]
        mw.action_export.setShortcut(QKeySequence.StandardKey.Save)
        mw.action_export.setStatusTip("Export items to a Lua file")
        mw.action_export.triggered.connect(actions.export_items)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.triggered.connect(mw.close)

        mw.action_add_item = QAction(qta.icon("mdi.plus"), "&Add New Item", mw)  # type: ignore[arg-type]
        mw.action_add_item.setShortcut(QKeySequence.StandardKey.New)
        mw.action_add_item.triggered.connect(actions.add_item)

        mw.action_edit_item = QAction(qta.icon("mdi.pencil"), "&Edit Item", mw)  # type: ignore[arg-type]
        mw.action_edit_item.triggered.connect(actions.edit_selected_item)

        mw.action_delete_item = QAction(qta.icon("mdi.delete"), "&Delete Item", mw)  # type: ignore[arg-type]
        mw.action_delete_item.setShortcut(QKeySequence.StandardKey.Delete)
        mw.action_delete_item.triggered.connect(actions.delete_selected_item)

        mw.action_nested_tables = QAction("Allow &Nested Tables", mw)
        mw.action_nested_tables.setCheckable(True)
        mw.action_nested_tables.setChecked(mw.settings.nested_tables)
        mw.action_nested_tables.setStatusTip(
            "Read nested tables (e.g. combinable) inside item blocks on import"
        )
        mw.action_nested_tables.toggled.connect(actions.toggle_nested_tables)

        mw.action_about = QAction("&About", mw)
        mw.action_about.triggered.connect(actions.about)

        self.logger.debug("Actions created")

    def setup_menus(self) -> None:
        """Create the menu bar and toolbar from the actions."""
        mw = self.main_window
        menubar = mw.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(mw.action_import)
        file_menu.addAction(mw.action_export)
        file_menu.addSeparator()
        file_menu.addAction(mw.action_exit)

        items_menu = menubar.addMenu("&Items")
        items_menu.addAction(mw.action_add_item)
        items_menu.addAction(mw.action_edit_item)
        items_menu.addAction(mw.action_delete_item)

        settings_menu = menubar.addMenu("&Settings")
        settings_menu.addAction(mw.action_nested_tables)

        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)

        toolbar = mw.addToolBar("Main")
        toolbar.setObjectName("main_toolbar")
        toolbar.addAction(mw.action_import)
        toolbar.addAction(mw.action_add_item)
        toolbar.addAction(mw.action_export)

        self.logger.debug("Menus created")

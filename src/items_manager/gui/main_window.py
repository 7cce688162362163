"""
Main application window for Items Manager.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget
from PySide6.QtGui import QAction, QCloseEvent
import qtawesome as qta  # type: ignore

from ..items.service import ItemsService
from ..settings import AppSettings
from .actions import MainWindowActions
from .item_browser import ItemBrowser
from .menu import MenuBuilder


class MainWindow(QMainWindow):
    """Main application window."""

    # Menu actions (created by MenuBuilder)
    action_import: QAction
    action_export: QAction
    action_exit: QAction
    action_add_item: QAction
    action_edit_item: QAction
    action_delete_item: QAction
    action_nested_tables: QAction
    action_about: QAction

    def __init__(
        self,
        settings: AppSettings,
        service: Optional[ItemsService] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.service = service or ItemsService(settings)

        self.main_window_actions = MainWindowActions(self)
        self.menu_builder = MenuBuilder(self)

        self.item_browser = ItemBrowser(self)
        self.item_browser.item_activated.connect(self.main_window_actions.edit_item)
        self.setCentralWidget(self.item_browser)

        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready - import an items.lua file to begin", 5000)

        if not self.settings.restore_window_geometry(self):
            self.resize(1100, 700)

        self.setWindowTitle("Items Manager")
        self.setWindowIcon(qta.icon("mdi.package-variant"))  # type: ignore[arg-type]

        self.item_browser.set_collection(self.service.collection)
        self.logger.info("Main window initialized")

    def refresh_items(self, categories_changed: bool = False) -> None:
        """Redraw the item list, and the category filter after an import."""
        if categories_changed:
            self.item_browser.refresh_categories()
        self.item_browser.refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save window geometry on close."""
        self.settings.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)

"""
Item browser widget.

Provides a searchable list of items filtered by category.
"""

from typing import Optional
import logging

from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)
from PySide6.QtCore import Qt, Signal

from ..items.collection import ALL_CATEGORIES, ItemCollection


class ItemBrowser(QWidget):
    """
    Widget for browsing and selecting items.

    Provides filtering by category and text search.
    """

    # Emitted with the item key when a row is double-clicked or activated
    item_activated = Signal(str)

    COLUMNS = ["Key", "Label", "Type", "Weight", "Image", "Flags"]

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.collection: Optional[ItemCollection] = None
        self.setup_ui()
        self.logger.debug("ItemBrowser initialized")

    def setup_ui(self) -> None:
        """Setup the user interface."""
        layout = QVBoxLayout(self)

        filter_layout = QHBoxLayout()

        filter_layout.addWidget(QLabel("Search:"))
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search items...")
        self.search_edit.textChanged.connect(self.refresh)
        filter_layout.addWidget(self.search_edit)

        filter_layout.addWidget(QLabel("Category:"))
        self.category_combo = QComboBox()
        self.category_combo.addItem("All Categories", ALL_CATEGORIES)
        self.category_combo.currentIndexChanged.connect(self.refresh)
        filter_layout.addWidget(self.category_combo)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self.clear_search)
        filter_layout.addWidget(clear_btn)

        layout.addLayout(filter_layout)

        self.item_tree = QTreeWidget()
        self.item_tree.setHeaderLabels(self.COLUMNS)
        self.item_tree.setRootIsDecorated(False)
        self.item_tree.setAlternatingRowColors(True)
        self.item_tree.setColumnWidth(0, 200)
        self.item_tree.setColumnWidth(1, 200)
        self.item_tree.itemActivated.connect(self.on_item_activated)
        self.item_tree.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        layout.addWidget(self.item_tree)

        self.status_label = QLabel("No items loaded")
        layout.addWidget(self.status_label)

    def set_collection(self, collection: ItemCollection) -> None:
        """Attach the collection and rebuild categories and rows."""
        self.collection = collection
        self.refresh_categories()
        self.refresh()

    def refresh_categories(self) -> None:
        """Rebuild the category combo from the collection."""
        current = self.category_combo.currentData()
        self.category_combo.blockSignals(True)
        self.category_combo.clear()
        self.category_combo.addItem("All Categories", ALL_CATEGORIES)
        if self.collection:
            for category in self.collection.get_categories():
                self.category_combo.addItem(category, category)

        index = self.category_combo.findData(current)
        self.category_combo.setCurrentIndex(max(index, 0))
        self.category_combo.blockSignals(False)

    def refresh(self) -> None:
        """Rebuild rows for the current search and category."""
        self.item_tree.clear()
        if not self.collection:
            self.status_label.setText("No items loaded")
            return

        category = self.category_combo.currentData() or ALL_CATEGORIES
        matches = self.collection.filter_items(self.search_edit.text(), category)

        for key, record in matches:
            flags = [
                label
                for field, label in (("unique", "Unique"), ("useable", "Useable"))
                if record.get(field) is True
            ]
            row = QTreeWidgetItem(
                [
                    key,
                    str(record.get("label", "")),
                    str(record.get("type", "")),
                    str(record.get("weight", "")),
                    str(record.get("image", "")),
                    ", ".join(flags),
                ]
            )
            row.setData(0, Qt.ItemDataRole.UserRole, key)
            row.setToolTip(1, str(record.get("description") or "No description"))
            self.item_tree.addTopLevelItem(row)

        self.status_label.setText(f"Showing {len(matches)} of {len(self.collection)} items")

    def selected_key(self) -> Optional[str]:
        """Return the key of the selected row, if any."""
        item = self.item_tree.currentItem()
        if item is None:
            return None
        return item.data(0, Qt.ItemDataRole.UserRole)

    def clear_search(self) -> None:
        """Reset search text and category."""
        self.search_edit.clear()
        self.category_combo.setCurrentIndex(0)

    def on_item_activated(self, item: QTreeWidgetItem, column: int) -> None:
        key = item.data(0, Qt.ItemDataRole.UserRole)
        if key:
            self.item_activated.emit(key)

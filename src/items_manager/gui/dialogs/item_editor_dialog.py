"""
Item editor dialog.

Edits the user-facing fields of one record. The key and ``name`` are not
edited here: they are derived from the label when the item is saved.
"""

import logging
from typing import Any, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)
import qtawesome as qta  # type: ignore

from ...lua_table.models import ItemRecord


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except (TypeError, ValueError):
        return 0.0


def single_line(text: str) -> str:
    """Join the lines of ``text`` with single spaces.

    Exported strings are Lua short strings, which cannot hold a raw newline.
    """
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


class ItemEditorDialog(QDialog):
    """Form for the label, weight, type, image, description and flags of an item."""

    def __init__(
        self,
        record: ItemRecord,
        categories: List[str],
        parent: Optional[QWidget] = None,
        title: str = "Edit Item",
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.setWindowTitle(title)
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.WindowCloseButtonHint
        )
        self.setModal(True)
        self.setMinimumWidth(420)
        self.record = dict(record)
        self.categories = categories
        self.setup_ui()
        self.load_record()

    def setup_ui(self) -> None:
        """Setup the user interface."""
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.label_edit = QLineEdit()
        form.addRow("Label:", self.label_edit)

        self.weight_spin = QDoubleSpinBox()
        self.weight_spin.setRange(0, 1_000_000_000)
        self.weight_spin.setDecimals(2)
        form.addRow("Weight:", self.weight_spin)

        self.type_combo = QComboBox()
        self.type_combo.setEditable(True)
        self.type_combo.addItems(self.categories)
        form.addRow("Type:", self.type_combo)

        self.image_edit = QLineEdit()
        self.image_edit.setPlaceholderText("Enter image filename")
        self.image_edit.addAction(
            qta.icon("mdi.image-outline"), QLineEdit.ActionPosition.LeadingPosition  # type: ignore[arg-type]
        )
        form.addRow("Image:", self.image_edit)

        self.description_edit = QPlainTextEdit()
        self.description_edit.setFixedHeight(80)
        form.addRow("Description:", self.description_edit)

        layout.addLayout(form)

        flags_layout = QHBoxLayout()
        self.unique_check = QCheckBox("Unique")
        self.useable_check = QCheckBox("Useable")
        self.should_close_check = QCheckBox("Should Close")
        for check in (self.unique_check, self.useable_check, self.should_close_check):
            flags_layout.addWidget(check)
        flags_layout.addStretch()
        layout.addLayout(flags_layout)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def load_record(self) -> None:
        """Fill the form from the record."""
        record = self.record
        self.label_edit.setText(str(record.get("label") or ""))
        self.weight_spin.setValue(_as_number(record.get("weight", 0)))
        self.type_combo.setCurrentText(str(record.get("type") or ""))
        self.image_edit.setText(str(record.get("image") or ""))
        self.description_edit.setPlainText(str(record.get("description") or ""))
        self.unique_check.setChecked(record.get("unique") is True)
        self.useable_check.setChecked(record.get("useable") is True)
        self.should_close_check.setChecked(record.get("shouldClose") is True)

    def get_record(self) -> ItemRecord:
        """Return the edited record, keeping fields the form does not show."""
        weight = self.weight_spin.value()
        updated = dict(self.record)
        updated.update(
            {
                "label": self.label_edit.text(),
                "weight": int(weight) if weight.is_integer() else weight,
                "type": self.type_combo.currentText(),
                "image": self.image_edit.text(),
                "description": single_line(self.description_edit.toPlainText()),
                "unique": self.unique_check.isChecked(),
                "useable": self.useable_check.isChecked(),
                "shouldClose": self.should_close_check.isChecked(),
            }
        )
        return updated

    def accept(self) -> None:
        """Refuse to save an item whose label would give an empty key."""
        if not self.label_edit.text().strip():
            QMessageBox.warning(self, "Missing Label", "The item label cannot be empty.")
            self.label_edit.setFocus()
            return
        self.logger.debug(f"Item '{self.label_edit.text()}' accepted")
        super().accept()

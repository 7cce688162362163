"""
Dialog windows for Items Manager.
"""

from .about_dialog import show_about_dialog
from .item_editor_dialog import ItemEditorDialog

__all__ = [
    "show_about_dialog",
    "ItemEditorDialog",
]

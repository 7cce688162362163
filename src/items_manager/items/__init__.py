"""
Item collection and import/export service.

Usage:
    from items_manager.items import ItemsService

    service = ItemsService()
    service.import_file("items.lua")
    text = service.export_text()
"""

from .types import KeyCollisionPolicy, ImportSummary
from .collection import ItemCollection, derive_key, derive_categories, new_item
from .service import ItemsService

__all__ = [
    "ItemsService",
    "ItemCollection",
    "KeyCollisionPolicy",
    "ImportSummary",
    "derive_key",
    "derive_categories",
    "new_item",
]

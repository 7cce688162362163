"""
Ordered item collection with the editing operations of the items editor.

Keeps the dict-based records produced by the decoder and maintains the
category list derived from the last import.
"""

import logging
import re
import time
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import ItemNotFoundError, KeyConflictError
from ..lua_table.models import ItemRecord, RecordCollection
from .types import KeyCollisionPolicy

NEW_ITEM_LABEL = "New Item"
DEFAULT_CATEGORY = "item"
ALL_CATEGORIES = "all"

_WHITESPACE = re.compile(r"\s+")


def derive_key(label: str) -> str:
    """Build an item key from its label: lower case, whitespace runs to '_'."""
    return _WHITESPACE.sub("_", str(label).lower())


def derive_categories(records: RecordCollection) -> List[str]:
    """Return the distinct ``type`` values of ``records`` in first-seen order."""
    seen: Dict[str, None] = {}
    for record in records.values():
        item_type = record.get("type") if record else None
        if isinstance(item_type, str):
            seen.setdefault(item_type, None)
    return list(seen)


def new_item(category: Optional[str] = None) -> ItemRecord:
    """Return the template record used for freshly added items."""
    return {
        "name": derive_key(NEW_ITEM_LABEL),
        "label": NEW_ITEM_LABEL,
        "weight": 0,
        "type": category or DEFAULT_CATEGORY,
        "image": "placeholder.png",
        "unique": False,
        "useable": False,
        "shouldClose": True,
        "combinable": None,
        "description": "",
    }


def _text(value: object) -> str:
    return "" if value is None else str(value)


class ItemCollection:
    """Insertion-ordered mapping of item key -> record.

    The category list is recomputed wholesale by ``replace_all`` (an import)
    and is not touched by individual edits.
    """

    def __init__(
        self,
        records: Optional[RecordCollection] = None,
        policy: KeyCollisionPolicy = KeyCollisionPolicy.OVERWRITE,
    ):
        self.items: RecordCollection = {}
        self.categories: List[str] = []
        self.policy = policy
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        if records:
            self.replace_all(records)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def get(self, key: str) -> Optional[ItemRecord]:
        """Return the record stored under ``key`` or None."""
        return self.items.get(key)

    def get_categories(self) -> List[str]:
        """Return a copy of the category list."""
        return self.categories.copy()

    # === WHOLESALE REPLACEMENT ===

    def replace_all(self, records: RecordCollection) -> None:
        """Replace every record and recompute the categories."""
        self.items = dict(records)
        self.refresh_categories()
        self.logger.debug(
            f"Collection replaced: {len(self.items)} items, {len(self.categories)} categories"
        )

    def refresh_categories(self) -> List[str]:
        """Recompute categories from the current records."""
        self.categories = derive_categories(self.items)
        return self.get_categories()

    def clear(self) -> None:
        """Remove all records and categories."""
        self.items = {}
        self.categories = []

    # === SINGLE RECORD OPERATIONS ===

    def upsert(
        self,
        key: str,
        record: ItemRecord,
        replace: Optional[str] = None,
        front: bool = False,
    ) -> None:
        """Insert ``record`` under ``key``, optionally replacing another key.

        The new entry's key wins: the entry at ``replace`` and any other entry
        already stored at ``key`` are removed. Without ``front`` the record
        takes the position of ``replace`` (or of ``key``), otherwise it goes
        first. Other records keep their order.
        """
        anchor = replace if replace is not None and replace in self.items else key
        updated: RecordCollection = {}

        if front:
            updated[key] = record

        for existing_key, existing in self.items.items():
            if existing_key == anchor and not front:
                updated[key] = record
            elif existing_key == key or existing_key == replace:
                continue
            else:
                updated[existing_key] = existing

        if key not in updated:
            updated[key] = record

        self.items = updated

    def add_new_item(self, category: Optional[str] = None) -> str:
        """Insert a template item at the front under a provisional key.

        Returns:
            The provisional key (``new_item_<milliseconds>``)
        """
        base = derive_key(NEW_ITEM_LABEL)
        stamp = int(time.time() * 1000)
        key = f"{base}_{stamp}"
        while key in self.items:
            stamp += 1
            key = f"{base}_{stamp}"

        default_category = category or (self.categories[0] if self.categories else None)
        self.upsert(key, new_item(default_category), front=True)
        self.logger.info(f"Added new item '{key}'")
        return key

    def save_item(self, key: str, record: ItemRecord) -> str:
        """Store an edited record under the key derived from its label.

        The record's ``name`` is set to the new key and the entry moves to the
        front, replacing ``key``.

        Raises:
            ItemNotFoundError: if ``key`` is not in the collection
            KeyConflictError: if the new key belongs to another item and the
                collision policy is ERROR

        Returns:
            The key the record is now stored under
        """
        if key not in self.items:
            raise ItemNotFoundError(key)

        new_key = derive_key(_text(record.get("label"))) or key

        if new_key != key and new_key in self.items:
            if self.policy is KeyCollisionPolicy.ERROR:
                raise KeyConflictError(new_key, key)
            self.logger.warning(
                f"Saving '{key}' as '{new_key}' overwrites an existing item with that key"
            )

        updated = dict(record)
        updated["name"] = new_key
        self.upsert(new_key, updated, replace=key, front=True)

        if new_key != key:
            self.logger.info(f"Item '{key}' saved as '{new_key}'")
        else:
            self.logger.info(f"Item '{key}' saved")
        return new_key

    def delete_item(self, key: str) -> ItemRecord:
        """Remove and return the record at ``key``.

        Raises:
            ItemNotFoundError: if ``key`` is not in the collection
        """
        try:
            record = self.items.pop(key)
        except KeyError:
            raise ItemNotFoundError(key) from None
        self.logger.info(f"Deleted item '{key}'")
        return record

    def discard_item(self, key: str) -> None:
        """Remove ``key`` if present (used when a new item is cancelled)."""
        if self.items.pop(key, None) is not None:
            self.logger.debug(f"Discarded item '{key}'")

    # === QUERIES ===

    def filter_items(
        self, search: str = "", category: str = ALL_CATEGORIES
    ) -> List[Tuple[str, ItemRecord]]:
        """Return ``(key, record)`` pairs matching a search text and category.

        The search is a case-insensitive substring match on the key, label
        and description. Category ``"all"`` matches every type.
        """
        needle = search.lower()
        matches: List[Tuple[str, ItemRecord]] = []

        for key, record in self.items.items():
            if not record:
                continue

            matches_search = not search or any(
                needle in text.lower()
                for text in (
                    key,
                    _text(record.get("label")),
                    _text(record.get("description")),
                )
            )
            matches_category = category == ALL_CATEGORIES or record.get("type") == category

            if matches_search and matches_category:
                matches.append((key, record))

        return matches

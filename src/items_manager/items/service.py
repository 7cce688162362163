"""
Main service for importing and exporting item files.

Ties the Lua table codec to the item collection: locates the items table in
a loaded file, decodes it, replaces the collection and recomputes categories,
and writes the collection back as a Lua file.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ..lua_table.decoder import ValueDecoder
from ..lua_table.extractor import extract_items_table
from ..lua_table.models import DEFAULT_NAMESPACE, RecordCollection
from ..lua_table.serializer import RecordSerializer
from .collection import ItemCollection
from .types import ImportSummary, KeyCollisionPolicy

if TYPE_CHECKING:
    from ..settings import AppSettings


class ItemsService:
    """Service for working with an items file.

    Settings, when given, supply the namespace, the nesting mode and the key
    collision policy; explicit arguments override them.
    """

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        namespace: Optional[str] = None,
        nested: Optional[bool] = None,
        policy: Optional[KeyCollisionPolicy] = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        if namespace is None:
            namespace = settings.namespace if settings else DEFAULT_NAMESPACE
        if nested is None:
            nested = settings.nested_tables if settings else False
        if policy is None:
            policy = settings.key_collision_policy if settings else KeyCollisionPolicy.OVERWRITE

        self.namespace = namespace
        self.nested = nested
        self.collection = ItemCollection(policy=policy)
        self.current_path: Optional[Path] = None

        self.logger.debug(
            f"ItemsService initialized (namespace={namespace}, nested={nested}, "
            f"policy={policy.value})"
        )

    # === IMPORT ===

    def decode(self, text: str) -> RecordCollection:
        """Decode a whole file's text without touching the collection."""
        inner = extract_items_table(text, self.namespace)
        return ValueDecoder(nested=self.nested).decode(inner)

    def import_text(self, text: str, source: str = "") -> ImportSummary:
        """Replace the collection with the items found in ``text``.

        A file without an items table yields an empty collection rather than
        an error.
        """
        records = self.decode(text)
        self.collection.replace_all(records)

        summary = ImportSummary(
            item_count=len(records),
            categories=self.collection.get_categories(),
            source=source,
        )
        self.logger.info(
            f"Imported {summary.item_count} items in {len(summary.categories)} categories"
            + (f" from {source}" if source else "")
        )
        return summary

    def import_file(self, path: str | Path) -> ImportSummary:
        """Read ``path`` as UTF-8 and import it.

        Raises:
            OSError: if the file cannot be read
        """
        file_path = Path(path)
        text = file_path.read_text(encoding="utf-8", errors="replace")
        summary = self.import_text(text, source=str(file_path))
        self.current_path = file_path

        if self.settings:
            self.settings.add_recent_file(file_path)
            self.settings.last_directory = file_path.parent
        return summary

    # === EXPORT ===

    def export_text(self) -> str:
        """Return the collection as a complete items file."""
        return RecordSerializer(namespace=self.namespace).export(self.collection.items)

    def export_file(self, path: str | Path) -> Path:
        """Write the collection to ``path`` as UTF-8.

        Raises:
            OSError: if the file cannot be written
            SerializationError: if a record cannot be encoded
        """
        file_path = Path(path)
        document = self.export_text()
        file_path.write_text(document, encoding="utf-8")
        self.logger.info(f"Exported {len(self.collection)} items to {file_path}")

        if self.settings:
            self.settings.last_directory = file_path.parent
        return file_path

    def default_export_name(self) -> str:
        """File name offered when exporting."""
        if self.settings:
            return self.settings.export_file_name
        return "items.lua"

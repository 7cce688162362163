"""
Items Manager: editor for Lua item tables

Reads ``Namespace.Items = { ... };`` files into ordered item records and
writes them back as loadable Lua.
"""

__version__ = "0.1.0"
__author__ = "Items Manager Contributors"

from .errors import ItemsError, ItemNotFoundError, KeyConflictError, SerializationError
from .lua_table import (
    ItemRecord,
    RecordCollection,
    BlockExtractor,
    ValueDecoder,
    RecordSerializer,
    decode_items,
    export_document,
)
from .items import ItemsService, ItemCollection, KeyCollisionPolicy

__all__ = [
    # Services
    "ItemsService",
    "ItemCollection",
    "KeyCollisionPolicy",
    # Codec
    "BlockExtractor",
    "ValueDecoder",
    "RecordSerializer",
    "decode_items",
    "export_document",
    # Data models
    "ItemRecord",
    "RecordCollection",
    # Errors
    "ItemsError",
    "ItemNotFoundError",
    "KeyConflictError",
    "SerializationError",
]

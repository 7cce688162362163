"""
Reading and writing Lua item tables.

Provides the block extractor, the value decoder and the record serializer.
The two directions are independent and share only the field schema in
``models``.
"""

from .models import (
    ItemRecord,
    RecordCollection,
    Block,
    LuaTable,
    LuaValue,
    ValueKind,
    FIELD_ORDER,
    FIELD_DEFAULTS,
    DEFAULT_NAMESPACE,
)
from .extractor import BlockExtractor, iter_blocks, extract_items_table
from .decoder import ValueDecoder, classify_token, decode_block, decode_items
from .serializer import RecordSerializer, serialize_items, export_document

__all__ = [
    # Type aliases
    "ItemRecord",
    "RecordCollection",
    "Block",
    # Values
    "LuaTable",
    "LuaValue",
    "ValueKind",
    # Constants
    "FIELD_ORDER",
    "FIELD_DEFAULTS",
    "DEFAULT_NAMESPACE",
    # Extraction
    "BlockExtractor",
    "iter_blocks",
    "extract_items_table",
    # Decoding
    "ValueDecoder",
    "classify_token",
    "decode_block",
    "decode_items",
    # Serialization
    "RecordSerializer",
    "serialize_items",
    "export_document",
]

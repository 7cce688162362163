"""
Data models for the Lua items table.

Records stay plain dicts so that imported blocks keep whatever keys the
source file had. The tagged ``LuaValue`` is what the decoder produces for a
single ``key = value`` token before it is stored in a record.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, TypeAlias

ItemRecord: TypeAlias = Dict[str, Any]
"""A single item (e.g. water_bottle) as a dict of field name -> value."""

RecordCollection: TypeAlias = Dict[str, ItemRecord]
"""Maps the outer table key to its item record, in insertion order."""

Block: TypeAlias = Tuple[str, str]
"""An extracted ``(key, inner_text)`` pair."""


# Canonical field order of an exported item block
FIELD_ORDER: Tuple[str, ...] = (
    "name",
    "label",
    "weight",
    "type",
    "image",
    "unique",
    "useable",
    "shouldClose",
    "combinable",
    "description",
)

STRING_FIELDS = frozenset({"name", "label", "type", "image", "description"})
NUMBER_FIELDS = frozenset({"weight"})
BOOL_FIELDS = frozenset({"unique", "useable", "shouldClose"})
OPAQUE_FIELDS = frozenset({"combinable"})

# Used by the serializer when a record lacks a field; "name" falls back to the key
FIELD_DEFAULTS: Dict[str, Any] = {
    "label": "",
    "weight": 0,
    "type": "",
    "image": "",
    "unique": False,
    "useable": False,
    "shouldClose": True,
    "combinable": None,
    "description": "",
}

DEFAULT_NAMESPACE = "QBShared"

# Bare numeric literals, shared by the decoder and the serializer
DECIMAL_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
HEX_NUMBER = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")


class ValueKind(Enum):
    """Shape of a decoded value token."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    TEXT = "text"
    OPAQUE = "opaque"


class LuaTable(str):
    """Raw source of a nested table kept verbatim (e.g. a combinable entry)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"LuaTable({str.__repr__(self)})"


@dataclass(frozen=True)
class LuaValue:
    """A classified value token."""

    kind: ValueKind
    value: Any
    raw: str = ""

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

"""
Serialization of item records back into a Lua items table.

Output is deterministic: records keep collection order and every block lists
all fields in FIELD_ORDER. String values are written between double quotes
as-is (a double quote inside a value breaks the output). ``combinable``
structures that were not read as raw Lua text are written as JSON.
"""

import logging
import math
from typing import Any, List

import orjson

from ..errors import SerializationError
from .models import (
    BOOL_FIELDS,
    DECIMAL_NUMBER,
    DEFAULT_NAMESPACE,
    FIELD_DEFAULTS,
    FIELD_ORDER,
    NUMBER_FIELDS,
    STRING_FIELDS,
    ItemRecord,
    LuaTable,
    RecordCollection,
)

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


def format_number(value: Any, field: str = "weight") -> str:
    """Format a numeric field as a bare literal."""
    if isinstance(value, str) and DECIMAL_NUMBER.fullmatch(value.strip()):
        value = float(value) if any(c in value for c in ".eE") else int(value)

    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or (isinstance(value, float) and not math.isfinite(value))
    ):
        logger.warning(f"Invalid number for '{field}': {value!r}, writing default")
        value = FIELD_DEFAULTS.get(field, 0)

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_bool(value: Any, field: str = "") -> str:
    """Format a boolean field as ``true``/``false``."""
    if isinstance(value, str) and value.strip() in ("true", "false"):
        value = value.strip() == "true"
    if not isinstance(value, bool):
        logger.warning(f"Invalid boolean for '{field}': {value!r}, writing default")
        value = bool(FIELD_DEFAULTS.get(field, False))
    return "true" if value else "false"


def format_string(value: Any) -> str:
    """Wrap a value in double quotes without escaping.

    Booleans and numbers are quoted in their Lua spelling, so a decoded
    ``label = true`` comes back as ``"true"`` rather than ``"True"``.
    """
    if value is None:
        value = ""
    elif isinstance(value, bool):
        value = format_bool(value)
    elif isinstance(value, (int, float)):
        value = format_number(value)
    return f'"{value}"'


def format_combinable(value: Any) -> str:
    """Format the opaque ``combinable`` field.

    Empty values become ``nil``. Raw Lua tables read by the decoder are
    written back unchanged, anything else is encoded as JSON.
    """
    if not value:
        return "nil"
    if isinstance(value, LuaTable):
        return str(value)
    try:
        return orjson.dumps(value).decode("utf-8")
    except TypeError as e:
        raise SerializationError(f"Cannot encode combinable value {value!r}: {e}") from e


def format_field(field: str, value: Any) -> str:
    """Format one field value according to its declared kind."""
    if field in STRING_FIELDS:
        return format_string(value)
    if field in NUMBER_FIELDS:
        return format_number(value, field)
    if field in BOOL_FIELDS:
        return format_bool(value, field)
    return format_combinable(value)


def serialize_record(key: str, record: ItemRecord, indent: str = DEFAULT_INDENT) -> str:
    """Serialize one record as a ``["key"] = { ... }`` block."""
    lines: List[str] = []
    for field in FIELD_ORDER:
        if field in record:
            value = record[field]
        elif field == "name":
            value = key
        else:
            value = FIELD_DEFAULTS[field]
        lines.append(f"{indent * 2}{field} = {format_field(field, value)}")

    body = ",\n".join(lines)
    return f'{indent}["{key}"] = {{\n{body}\n{indent}}}'


def serialize_items(collection: RecordCollection, indent: str = DEFAULT_INDENT) -> str:
    """Serialize a whole collection as a Lua table literal."""
    if not collection:
        return "{}"
    blocks = [serialize_record(key, record, indent) for key, record in collection.items()]
    return "{\n" + ",\n".join(blocks) + "\n}"


def document_preamble(namespace: str = DEFAULT_NAMESPACE) -> str:
    """First line of an exported items file."""
    return f"{namespace} = {namespace} or {{}};"


def export_document(
    collection: RecordCollection,
    namespace: str = DEFAULT_NAMESPACE,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Build a complete items file for ``collection``."""
    table = serialize_items(collection, indent)
    return f"{document_preamble(namespace)}\n{namespace}.Items = {table};\n"


class RecordSerializer:
    """Writes record collections as Lua items files."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, indent: str = DEFAULT_INDENT):
        self.namespace = namespace
        self.indent = indent
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def serialize(self, collection: RecordCollection) -> str:
        """Return only the table literal."""
        return serialize_items(collection, self.indent)

    def export(self, collection: RecordCollection) -> str:
        """Return the full document with the namespace preamble."""
        document = export_document(collection, self.namespace, self.indent)
        self.logger.debug(
            f"Serialized {len(collection)} items for namespace '{self.namespace}' "
            f"({len(document)} chars)"
        )
        return document

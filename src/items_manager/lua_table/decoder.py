"""
Value decoding for extracted item blocks.

Each ``key = value`` pair is classified purely by the shape of its token, in a
fixed order: nil, boolean, number, nested table, and finally string. Decoding
never fails; anything unrecognised becomes a string.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple, Union

from .extractor import iter_blocks
from .models import (
    DECIMAL_NUMBER,
    HEX_NUMBER,
    ItemRecord,
    LuaTable,
    LuaValue,
    RecordCollection,
    ValueKind,
)

logger = logging.getLogger(__name__)

FIELD_PAIR = re.compile(r"""^\s*\[?["']?([A-Za-z0-9_]+)["']?\]?\s*=(.*)$""", re.DOTALL)


def _parse_number(token: str) -> Optional[Union[int, float]]:
    if HEX_NUMBER.fullmatch(token):
        return int(token, 16)
    if DECIMAL_NUMBER.fullmatch(token):
        if any(c in token for c in ".eE"):
            return float(token)
        return int(token)
    return None


def _unquote(token: str) -> str:
    """Strip one layer of matching single or double quotes."""
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return token[1:-1]
    return token


def classify_token(token: str) -> LuaValue:
    """Classify a raw value token into a tagged value.

    The order matters: quoted ``"true"`` or ``"123"`` stay strings because only
    bare tokens can be booleans or numbers.
    """
    raw = token.strip()

    if raw == "nil":
        return LuaValue(ValueKind.NULL, None, raw)

    if raw in ("true", "false"):
        return LuaValue(ValueKind.BOOL, raw == "true", raw)

    number = _parse_number(raw)
    if number is not None:
        return LuaValue(ValueKind.NUMBER, number, raw)

    if raw.startswith("{") and raw.endswith("}"):
        return LuaValue(ValueKind.OPAQUE, LuaTable(raw), raw)

    # No unescaping: backslash sequences are kept as written
    return LuaValue(ValueKind.TEXT, _unquote(raw), raw)


def split_fields(inner: str) -> List[str]:
    """Split block text at top-level commas.

    Commas inside quoted strings or nested braces do not split, and ``--``
    comments are dropped.
    """
    segments: List[str] = []
    pieces: List[str] = []
    depth = 0
    quote: Optional[str] = None
    start = 0
    i = 0
    length = len(inner)

    while i < length:
        ch = inner[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
        elif ch == '"' or ch == "'":
            quote = ch
        elif ch == "-" and inner.startswith("--", i):
            pieces.append(inner[start:i])
            newline = inner.find("\n", i)
            if newline == -1:
                start = i = length
                break
            start = i = newline
            continue
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            pieces.append(inner[start:i])
            segments.append("".join(pieces))
            pieces = []
            start = i + 1
        i += 1

    pieces.append(inner[start:])
    segments.append("".join(pieces))
    return segments


def decode_fields(inner: str) -> Iterator[Tuple[str, LuaValue]]:
    """Yield ``(field, value)`` for every ``key = value`` pair in a block."""
    for segment in split_fields(inner):
        match = FIELD_PAIR.match(segment)
        if match is None:
            if segment.strip():
                logger.debug(f"Skipping segment without assignment: {segment.strip()!r}")
            continue

        key, token = match.group(1), match.group(2)
        if not token.strip():
            logger.debug(f"Skipping field '{key}' with empty value")
            continue

        yield key, classify_token(token)


def decode_block(inner: str) -> ItemRecord:
    """Decode one block into a record.

    Fields that are not in the text are simply absent; no defaults are
    applied. A later duplicate field overrides an earlier one.
    """
    return {key: value.value for key, value in decode_fields(inner)}


def decode_items(text: str, nested: bool = False) -> RecordCollection:
    """Decode every block in ``text`` into a key -> record mapping.

    Outer keys and inner ``name`` fields are kept as found, even when they
    differ.
    """
    records: RecordCollection = {}
    for key, inner in iter_blocks(text, nested=nested):
        records[key] = decode_block(inner)
    return records


class ValueDecoder:
    """Decodes table text into item records."""

    def __init__(self, nested: bool = False):
        self.nested = nested
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def decode(self, text: str) -> RecordCollection:
        """Decode all blocks of ``text``; returns an empty mapping when none match."""
        records = decode_items(text, nested=self.nested)
        if records:
            self.logger.debug(f"Decoded {len(records)} item blocks")
        else:
            self.logger.info("No item blocks found in input")
        return records

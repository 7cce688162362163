"""
Block extraction for Lua item tables.

Finds ``name = { ... }`` assignments in raw text and yields the key with the
text between the braces. Only the first nesting level is guaranteed: unless
``nested`` is requested, a block ends at its first closing brace.
"""

import logging
import re
from typing import Iterator, Optional

from .models import Block, DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)

# [optional bracket][optional quote] identifier [optional quote][optional bracket] = {
BLOCK_HEADER = re.compile(r"""\[?["']?([A-Za-z0-9_]+)["']?\]?\s*=\s*\{""")


def _string_end(text: str, start: int) -> int:
    """Return the index just past the short string opened at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        # Short strings cannot span lines
        if ch == "\n":
            return i
        i += 1
    return len(text)


def _skip_past_covering(text: str, start: int, target: int) -> Optional[int]:
    """Check whether ``target`` lies inside a string or ``--`` comment.

    Scans from ``start`` (a position outside any string or comment). Returns
    the index just past the string or comment covering ``target``, or None
    when ``target`` is in plain code.
    """
    i = start
    while i < target:
        ch = text[i]
        if ch == '"' or ch == "'":
            end = _string_end(text, i)
        elif ch == "-" and text.startswith("--", i):
            newline = text.find("\n", i)
            end = len(text) if newline == -1 else newline
        else:
            i += 1
            continue
        if end > target:
            return end
        i = end
    return None


def _search_header(text: str, pos: int) -> Optional[re.Match[str]]:
    """Find the next block header at or after ``pos`` outside strings and comments."""
    while True:
        match = BLOCK_HEADER.search(text, pos)
        if match is None:
            return None
        start = match.start()
        resume = _skip_past_covering(text, pos, start)
        opener = text[start]
        if resume is None and opener in "\"'" and text[match.end(1):match.end(1) + 1] != opener:
            # The quote opens a string rather than wrapping the key
            resume = _string_end(text, start)
        if resume is None:
            return match
        logger.debug(f"Ignoring block header '{match.group(1)}' inside a comment or string")
        pos = resume


def _find_block_end(text: str, start: int, nested: bool) -> Optional[int]:
    """Return the index of the brace closing a block opened just before ``start``.

    Braces inside quoted strings and ``--`` line comments are skipped. In
    single-level mode an inner ``{`` does not deepen the scan, so the block is
    cut at the first ``}``.
    """
    depth = 1
    quote: Optional[str] = None
    truncated = False
    i = start
    length = len(text)

    while i < length:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            # Short strings cannot span lines
            if ch == quote or ch == "\n":
                quote = None
        elif ch == '"' or ch == "'":
            quote = ch
        elif ch == "-" and text.startswith("--", i):
            newline = text.find("\n", i)
            if newline == -1:
                return None
            i = newline
            continue
        elif ch == "{":
            if nested:
                depth += 1
            elif not truncated:
                truncated = True
                logger.debug(
                    f"Nested table at offset {i} is not supported in single-level mode, "
                    "block will end at the first closing brace"
                )
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1

    return None


def iter_blocks(text: str, nested: bool = False) -> Iterator[Block]:
    """Yield ``(key, inner_text)`` for every top-level assignment block.

    The scan is a forward pass that resumes after each consumed block.
    Headers inside quoted strings or ``--`` comments, such as a commented-out
    item, are not blocks. It never raises; text without blocks gives an empty
    sequence.

    Args:
        text: Raw table text (usually the inside of ``Namespace.Items = {...}``)
        nested: Track brace depth so blocks may contain nested tables

    Yields:
        Pairs of the identifier key and the raw text between the braces
    """
    pos = 0
    while True:
        match = _search_header(text, pos)
        if match is None:
            return

        end = _find_block_end(text, match.end(), nested)
        if end is None:
            # Unterminated block: keep looking for headers after this one
            logger.debug(f"Unterminated block '{match.group(1)}' at offset {match.start()}")
            pos = match.end()
            continue

        inner = text[match.end():end]
        pos = end + 1
        if not inner.strip():
            continue

        yield match.group(1), inner


class BlockExtractor:
    """Stateless extractor of top-level assignment blocks."""

    def __init__(self, nested: bool = False):
        self.nested = nested
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def extract(self, text: str) -> Iterator[Block]:
        """Return a fresh lazy sequence of blocks found in ``text``."""
        return iter_blocks(text, nested=self.nested)

    def extract_all(self, text: str) -> list[Block]:
        """Extract every block eagerly."""
        blocks = list(self.extract(text))
        self.logger.debug(f"Extracted {len(blocks)} blocks (nested={self.nested})")
        return blocks


def items_table_pattern(namespace: str = DEFAULT_NAMESPACE) -> re.Pattern[str]:
    """Build the ``<namespace>.Items = { ... };`` wrapper pattern."""
    return re.compile(
        rf"{re.escape(namespace)}\.Items\s*=\s*\{{(.*?)\}}\s*;", re.DOTALL
    )


def extract_items_table(text: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Return the inside of the items table wrapper, or "" when it is absent."""
    match = items_table_pattern(namespace).search(text)
    if match is None:
        logger.warning(f"No '{namespace}.Items = {{ ... }};' table found in input")
        return ""
    return match.group(1)

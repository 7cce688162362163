"""
Type definitions for the item collection.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class KeyCollisionPolicy(Enum):
    """What to do when an edited item's new key belongs to a different item."""
    OVERWRITE = "overwrite"
    ERROR = "error"

    @classmethod
    def from_value(cls, value: str) -> "KeyCollisionPolicy":
        """Parse a stored policy name, falling back to OVERWRITE."""
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.OVERWRITE


@dataclass
class ImportSummary:
    """Result of an import: how many items were read and which categories."""
    item_count: int
    categories: List[str] = field(default_factory=list)
    source: str = ""

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0

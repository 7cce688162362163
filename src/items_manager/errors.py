"""
Exception types for Items Manager.
"""


class ItemsError(Exception):
    """Base class for item collection and export errors."""
    pass


class ItemNotFoundError(ItemsError, KeyError):
    """Raised when an operation refers to a key that is not in the collection."""
    pass


class KeyConflictError(ItemsError):
    """Raised when a saved item's derived key belongs to another item."""

    def __init__(self, key: str, existing_key: str):
        super().__init__(
            f"Item key '{key}' derived from '{existing_key}' is already used by another item"
        )
        self.key = key
        self.existing_key = existing_key


class SerializationError(ItemsError):
    """Raised when a record cannot be written as Lua table text."""
    pass

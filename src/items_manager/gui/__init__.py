"""Desktop editor window for Items Manager."""

"""Tests for values produced by the item editor form."""

from items_manager.gui.dialogs.item_editor_dialog import single_line
from items_manager.lua_table.serializer import serialize_record


class TestDescriptionText:
    """Test that edited descriptions stay valid Lua short strings."""

    def test_lines_are_joined(self) -> None:
        assert single_line("line1\nline2") == "line1 line2"
        assert single_line("  first \r\n\n second\n") == "first second"

    def test_single_line_is_unchanged(self) -> None:
        assert single_line("For all the thirsty out there") == "For all the thirsty out there"
        assert single_line("") == ""

    def test_exported_description_has_no_newline(self) -> None:
        block = serialize_record("note", {"description": single_line("line1\nline2")})
        assert 'description = "line1 line2"' in block
        assert '"line1\n' not in block

"""Tests for writing records back as Lua."""

import pytest

from items_manager.errors import SerializationError
from items_manager.lua_table.decoder import decode_items
from items_manager.lua_table.extractor import extract_items_table
from items_manager.lua_table.models import FIELD_ORDER, LuaTable
from items_manager.lua_table.serializer import (
    RecordSerializer,
    export_document,
    format_bool,
    format_combinable,
    format_number,
    format_string,
    serialize_items,
    serialize_record,
)


def full_record(**overrides):
    record = {
        "name": "water_bottle",
        "label": "Bottle of Water",
        "weight": 500,
        "type": "item",
        "image": "water_bottle.png",
        "unique": False,
        "useable": True,
        "shouldClose": True,
        "combinable": None,
        "description": "For all the thirsty out there",
    }
    record.update(overrides)
    return record


def field_lines(block: str):
    return [line.strip() for line in block.splitlines()[1:-1]]


class TestFieldFormatting:
    """Test formatting of individual values."""

    def test_numbers(self) -> None:
        assert format_number(500) == "500"
        assert format_number(1.5) == "1.5"
        assert format_number(2.0) == "2"
        assert format_number("250") == "250"

    def test_invalid_number_uses_default(self) -> None:
        assert format_number(True) == "0"
        assert format_number("heavy") == "0"
        assert format_number(None) == "0"

    def test_booleans(self) -> None:
        assert format_bool(True, "unique") == "true"
        assert format_bool(False, "unique") == "false"
        assert format_bool("true", "unique") == "true"

    def test_invalid_boolean_uses_default(self) -> None:
        assert format_bool(None, "shouldClose") == "true"
        assert format_bool(1, "unique") == "false"

    def test_strings_keep_lua_spelling(self) -> None:
        assert format_string("Knife") == '"Knife"'
        assert format_string(None) == '""'
        assert format_string(True) == '"true"'
        assert format_string(False) == '"false"'
        assert format_string(1e20) == '"100000000000000000000"'
        assert format_string(7) == '"7"'

    def test_decoded_literals_in_string_fields(self) -> None:
        document = export_document(decode_items("x = { label = true, type = false, weight = 1 }"))
        assert 'label = "true",' in document
        assert 'type = "false",' in document

    def test_combinable_nil(self) -> None:
        assert format_combinable(None) == "nil"
        assert format_combinable({}) == "nil"

    def test_combinable_structure_is_json(self) -> None:
        value = {"accept": ["screwdriver"], "reward": "kit"}
        assert format_combinable(value) == '{"accept":["screwdriver"],"reward":"kit"}'

    def test_combinable_lua_table_is_verbatim(self) -> None:
        raw = LuaTable("{ accept = { 'screwdriver' } }")
        assert format_combinable(raw) == "{ accept = { 'screwdriver' } }"

    def test_unencodable_combinable_raises(self) -> None:
        with pytest.raises(SerializationError):
            format_combinable({"callback": object()})


class TestSerializeRecord:
    """Test one block."""

    def test_fields_in_canonical_order(self) -> None:
        block = serialize_record("water_bottle", full_record())
        lines = field_lines(block)
        assert [line.split(" = ")[0] for line in lines] == list(FIELD_ORDER)
        assert block.splitlines()[0] == '    ["water_bottle"] = {'

    def test_values_are_formatted(self) -> None:
        lines = field_lines(serialize_record("water_bottle", full_record()))
        assert lines == [
            'name = "water_bottle",',
            'label = "Bottle of Water",',
            "weight = 500,",
            'type = "item",',
            'image = "water_bottle.png",',
            "unique = false,",
            "useable = true,",
            "shouldClose = true,",
            "combinable = nil,",
            'description = "For all the thirsty out there"',
        ]

    def test_missing_fields_get_defaults(self) -> None:
        lines = field_lines(serialize_record("bread", {"label": "Bread"}))
        assert lines[0] == 'name = "bread",'
        assert "weight = 0," in lines
        assert "shouldClose = true," in lines
        assert lines[-1] == 'description = ""'

    def test_name_is_not_resynchronized(self) -> None:
        lines = field_lines(serialize_record("sandwich", full_record(name="burger")))
        assert lines[0] == 'name = "burger",'

    def test_extra_fields_are_not_written(self) -> None:
        block = serialize_record("water_bottle", full_record(decay=3))
        assert "decay" not in block


class TestSerializeCollection:
    """Test whole tables and documents."""

    def test_empty_collection(self) -> None:
        assert serialize_items({}) == "{}"
        assert decode_items(extract_items_table(export_document({}))) == {}

    def test_document_preamble(self) -> None:
        document = export_document({"water_bottle": full_record()})
        lines = document.splitlines()
        assert lines[0] == "QBShared = QBShared or {};"
        assert lines[1] == "QBShared.Items = {"
        assert document.endswith("};\n")

    def test_custom_namespace(self) -> None:
        document = RecordSerializer(namespace="ESX").export({"a": full_record()})
        assert document.startswith("ESX = ESX or {};\nESX.Items = {")

    def test_blocks_are_comma_separated_in_order(self) -> None:
        table = serialize_items({"b": full_record(), "a": full_record()})
        assert table.index('["b"]') < table.index('["a"]')
        assert "    },\n" in table

    def test_output_is_deterministic(self) -> None:
        collection = {"a": full_record(), "b": full_record(weight=1.25)}
        assert export_document(collection) == export_document(dict(collection))

    def test_combinable_nil_survives_reimport(self) -> None:
        document = export_document({"water_bottle": full_record()})
        assert "combinable = nil," in document
        records = decode_items(extract_items_table(document))
        assert records["water_bottle"]["combinable"] is None
        assert "combinable = nil," in export_document(records)


class TestRoundTrip:
    """Decoding serialized output gives back the same field values."""

    COMPARED = ("label", "weight", "type", "image", "unique", "useable", "shouldClose", "description")

    def test_round_trip(self) -> None:
        collection = {
            "water_bottle": full_record(),
            "phone": full_record(
                name="phone",
                label="Phone",
                weight=700,
                unique=True,
                useable=False,
                shouldClose=False,
                description="Calls, texts {and} apps -- not a comment",
            ),
            "empty_note": full_record(name="empty_note", label="Note", weight=0.5, description=""),
        }

        records = decode_items(extract_items_table(export_document(collection)))

        assert list(records) == list(collection)
        for key, original in collection.items():
            for field in self.COMPARED:
                assert records[key][field] == original[field], (key, field)


class TestSharedSchema:
    """Test that reading and writing agree on numeric literals."""

    def test_number_pattern_comes_from_models(self) -> None:
        from items_manager.lua_table import decoder, models, serializer

        assert serializer.DECIMAL_NUMBER is models.DECIMAL_NUMBER
        assert decoder.DECIMAL_NUMBER is models.DECIMAL_NUMBER
        assert not hasattr(serializer, "decode_items")

    def test_numeric_strings_written_as_numbers(self) -> None:
        assert format_number("1e3") == "1000"
        assert format_number("-2.5") == "-2.5"

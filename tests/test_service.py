"""Tests for ItemsService import and export."""

from pathlib import Path

import pytest

from items_manager.errors import KeyConflictError
from items_manager.items.service import ItemsService
from items_manager.items.types import KeyCollisionPolicy
from items_manager.lua_table.models import LuaTable


NESTED_ITEMS = """QBShared = QBShared or {}
QBShared.Items = {
    ['lockpick'] = { name = 'lockpick', label = 'Lockpick', weight = 300, type = 'item', image = 'lockpick.png', unique = false, useable = true, shouldClose = true, combinable = { accept = { 'screwdriverset' }, reward = 'advancedlockpick' }, description = 'Very useful' },
    ['screwdriverset'] = { name = 'screwdriverset', label = 'Toolkit', weight = 1000, type = 'item', image = 'screwdriverset.png', unique = false, useable = false, shouldClose = false, combinable = nil, description = 'Very useful to screw... screws...' },
};
"""


class TestImport:
    """Test reading items files into the collection."""

    def test_import_text(self, sample_items_text: str) -> None:
        service = ItemsService()
        summary = service.import_text(sample_items_text, source="items.lua")

        assert summary.item_count == 3
        assert summary.categories == ["item", "weapon"]
        assert summary.source == "items.lua"
        assert not summary.is_empty
        assert list(service.collection) == ["water_bottle", "phone", "weapon_knife"]

    def test_decoded_values(self, sample_items_text: str) -> None:
        service = ItemsService()
        service.import_text(sample_items_text)

        phone = service.collection.get("phone")
        assert phone is not None
        assert phone["label"] == "Phone"
        assert phone["weight"] == 700
        assert phone["unique"] is True
        assert phone["shouldClose"] is False
        assert phone["combinable"] is None

    def test_missing_wrapper_gives_empty_collection(self) -> None:
        service = ItemsService()
        service.import_text("print('hello')\nlocal x = 1\n")
        summary = service.import_text("Config = { enabled = true }")

        assert summary.is_empty
        assert summary.categories == []
        assert len(service.collection) == 0

    def test_import_replaces_previous_items(self, sample_items_text: str) -> None:
        service = ItemsService()
        service.import_text(sample_items_text)
        service.import_text(NESTED_ITEMS)

        assert "phone" not in service.collection
        assert service.collection.get_categories() == ["item"]

    def test_custom_namespace(self, sample_items_text: str) -> None:
        text = sample_items_text.replace("QBShared", "Shared")

        assert ItemsService().import_text(text).is_empty
        assert ItemsService(namespace="Shared").import_text(text).item_count == 3

    def test_import_file(self, sample_items_file: Path) -> None:
        service = ItemsService()
        summary = service.import_file(sample_items_file)

        assert summary.item_count == 3
        assert service.current_path == sample_items_file

    def test_import_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            ItemsService().import_file(tmp_path / "missing.lua")

    def test_single_level_cuts_nested_tables(self) -> None:
        service = ItemsService(nested=False)
        service.import_text(NESTED_ITEMS)

        lockpick = service.collection.get("lockpick")
        assert lockpick is not None
        assert "description" not in lockpick

    def test_nested_mode_keeps_whole_block(self) -> None:
        service = ItemsService(nested=True)
        service.import_text(NESTED_ITEMS)

        lockpick = service.collection.get("lockpick")
        assert lockpick is not None
        assert lockpick["description"] == "Very useful"
        assert isinstance(lockpick["combinable"], LuaTable)
        assert "screwdriverset" in service.collection


class TestExport:
    """Test writing the collection back out."""

    def test_export_text_has_preamble(self, sample_items_text: str) -> None:
        service = ItemsService()
        service.import_text(sample_items_text)

        document = service.export_text()
        assert document.startswith("QBShared = QBShared or {};\nQBShared.Items = {\n")
        assert document.endswith("};\n")

    def test_export_file_and_reimport(self, sample_items_text: str, tmp_path: Path) -> None:
        service = ItemsService()
        service.import_text(sample_items_text)

        path = service.export_file(tmp_path / "out.lua")
        assert path.exists()

        reloaded = ItemsService()
        reloaded.import_file(path)

        assert list(reloaded.collection) == list(service.collection)
        for key in service.collection:
            original = service.collection.get(key)
            assert original is not None
            for field, value in original.items():
                assert reloaded.collection.get(key)[field] == value

    def test_export_fills_missing_fields(self, sample_items_text: str) -> None:
        service = ItemsService()
        service.import_text(sample_items_text)

        reloaded = ItemsService()
        reloaded.import_text(service.export_text())

        knife = reloaded.collection.get("weapon_knife")
        assert knife is not None
        assert knife["shouldClose"] is True
        assert knife["combinable"] is None

    def test_nested_combinable_is_written_verbatim(self) -> None:
        service = ItemsService(nested=True)
        service.import_text(NESTED_ITEMS)

        document = service.export_text()
        assert (
            "combinable = { accept = { 'screwdriverset' }, reward = 'advancedlockpick' },"
            in document
        )

    def test_custom_namespace_export(self) -> None:
        service = ItemsService(namespace="Shared")
        document = service.export_text()
        assert document == "Shared = Shared or {};\nShared.Items = {};\n"

    def test_default_export_name(self) -> None:
        assert ItemsService().default_export_name() == "items.lua"


class TestWithSettings:
    """Test that the service follows and updates the settings."""

    def test_settings_supply_defaults(self, app_settings) -> None:
        app_settings.namespace = "Shared"
        app_settings.nested_tables = True
        app_settings.key_collision_policy = KeyCollisionPolicy.ERROR

        service = ItemsService(app_settings)

        assert service.namespace == "Shared"
        assert service.nested is True
        assert service.collection.policy is KeyCollisionPolicy.ERROR

    def test_explicit_arguments_win(self, app_settings) -> None:
        app_settings.nested_tables = True
        service = ItemsService(app_settings, nested=False, namespace="Other")
        assert service.nested is False
        assert service.namespace == "Other"

    def test_import_records_recent_file(self, app_settings, sample_items_file: Path) -> None:
        service = ItemsService(app_settings)
        service.import_file(sample_items_file)

        assert app_settings.recent_files == [str(sample_items_file)]
        assert app_settings.last_directory == sample_items_file.parent

    def test_export_updates_last_directory(self, app_settings, tmp_path: Path) -> None:
        out_dir = tmp_path / "export"
        out_dir.mkdir()
        service = ItemsService(app_settings)
        service.export_file(out_dir / "items.lua")

        assert app_settings.last_directory == out_dir

    def test_error_policy_reaches_collection(self, app_settings, sample_items_text: str) -> None:
        app_settings.key_collision_policy = KeyCollisionPolicy.ERROR
        service = ItemsService(app_settings)
        service.import_text(sample_items_text)

        record = dict(service.collection.get("weapon_knife"), label="Phone")
        with pytest.raises(KeyConflictError):
            service.collection.save_item("weapon_knife", record)

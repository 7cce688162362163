"""Shared fixtures for Items Manager tests."""

import logging
import uuid
from pathlib import Path

import pytest
from PySide6.QtCore import QSettings


SAMPLE_ITEMS = """QBShared = QBShared or {}
QBShared.Items = {
    -- Drinks
    ['water_bottle'] = { name = 'water_bottle', label = 'Bottle of Water', weight = 500, type = 'item', image = 'water_bottle.png', unique = false, useable = true, shouldClose = true, combinable = nil, description = 'For all the thirsty out there' },
    ["phone"] = {
        name = "phone",
        label = "Phone",
        weight = 700,
        type = "item",
        image = "phone.png",
        unique = true,
        useable = false,
        shouldClose = false,
        combinable = nil,
        description = "Neat phone ya got there"
    },
    weapon_knife = { name = 'weapon_knife', label = 'Knife', weight = 1000, type = 'weapon', image = 'weapon_knife.png', unique = true, useable = false, description = 'An instrument composed of a blade fixed into a handle' },
};
"""


@pytest.fixture
def sample_items_text() -> str:
    return SAMPLE_ITEMS


@pytest.fixture
def sample_items_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.lua"
    path.write_text(SAMPLE_ITEMS, encoding="utf-8")
    return path


@pytest.fixture
def app_settings(tmp_path: Path):
    """AppSettings stored under tmp_path with a throwaway profile."""
    from items_manager.settings import AppSettings

    QSettings.setPath(
        QSettings.Format.NativeFormat, QSettings.Scope.UserScope, str(tmp_path / "config")
    )
    settings = AppSettings(profile=f"pytest-{uuid.uuid4().hex}")
    yield settings
    settings.reset()


@pytest.fixture
def restore_logging():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)

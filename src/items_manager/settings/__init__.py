"""
Persistent settings for Items Manager.

Values are stored through Qt's QSettings, one group per profile, and are
exposed as typed properties on ``AppSettings``.

Usage:
    from items_manager.settings import AppSettings

    settings = AppSettings(profile="default")
    settings.namespace = "QBShared"
    if not settings.validate().is_valid:
        ...
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
]

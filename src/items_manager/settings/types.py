"""
Configuration types for Items Manager.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Stored settings layout version."""
    V0_9 = "0.9"
    V1_0 = "1.0"
    CURRENT = V1_0


class ConfigError(Exception):
    """Raised when a settings value is rejected."""
    pass


@dataclass
class ValidationResult:
    """Errors block startup; warnings are only logged."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    HooklogError
    └── ConfigError
        ├── MissingRequiredSettingError
        ├── InvalidSettingValueError
        └── InvalidLogLevelError
"""

from hooklog.kernel.errors.base import HooklogError
from hooklog.kernel.errors.config import (
    ConfigError,
    InvalidLogLevelError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "HooklogError",
    "InvalidLogLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]

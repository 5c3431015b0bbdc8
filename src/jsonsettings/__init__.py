"""jsonsettings: settings persisted to a JSON file with throttled saves."""

from .errors import (
    DirectoryAccessError,
    DirectoryCreateError,
    ParseError,
    ReadError,
    SettingsError,
    WriteError,
)
from .jsonvalue import JsonValue, deep_copy, reconcile
from .paths import SettingsPaths
from .settings import Settings, SettingsConfig, SettingsLogger
from .store import SettingsStore
from .throttle import Throttle

__all__ = [
    "DirectoryAccessError",
    "DirectoryCreateError",
    "JsonValue",
    "ParseError",
    "ReadError",
    "Settings",
    "SettingsConfig",
    "SettingsError",
    "SettingsLogger",
    "SettingsPaths",
    "SettingsStore",
    "Throttle",
    "WriteError",
    "deep_copy",
    "reconcile",
]

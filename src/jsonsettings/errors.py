"""Error kinds raised by the storage layer.

``Settings`` catches every one of these at the pipeline boundary and
reports it through its logger; none reach callers of ``save()``/``load()``.
"""

from __future__ import annotations

from pathlib import Path


class SettingsError(Exception):
    """Base class for settings persistence failures."""

    action = "settings I/O failed"

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.action} ({path}){detail}")


class DirectoryAccessError(SettingsError):
    """Stat of the settings directory failed for a reason other than absence."""

    action = "error accessing settings directory"


class DirectoryCreateError(SettingsError):
    """Recursive creation of the settings directory failed."""

    action = "error creating settings directory"


class WriteError(SettingsError):
    """Writing the settings file failed."""

    action = "error saving settings"


class ReadError(SettingsError):
    """The settings file is missing or unreadable."""

    action = "error reading settings"


class ParseError(SettingsError, ValueError):
    """The settings file does not contain valid JSON."""

    action = "error parsing settings"

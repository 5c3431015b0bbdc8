"""Settings file location, parameterized by a home directory.

Usage:
    paths = SettingsPaths(".myapp")                             # ~/.myapp/settings.json
    paths = SettingsPaths("/etc/myapp", path_is_absolute=True)  # /etc/myapp/settings.json
    paths = SettingsPaths(".myapp", home=tmp_path)              # tests
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_FILENAME = "settings.json"
JSON_SUFFIX = ".json"


def normalize_file_name(file_name: str) -> str:
    """Append ``.json`` to *file_name* unless it already ends with it."""
    if not file_name.endswith(JSON_SUFFIX):
        return file_name + JSON_SUFFIX
    return file_name


class SettingsPaths:
    """Directory and file path of one settings document."""

    def __init__(
        self,
        path: Path | str,
        file_name: str = DEFAULT_FILENAME,
        path_is_absolute: bool = False,
        home: Path | str | None = None,
    ) -> None:
        self.home = Path(home) if home is not None else Path.home()
        self.path_is_absolute = path_is_absolute
        self.file_name = normalize_file_name(file_name)
        if path_is_absolute:
            self.directory = Path(path)
        else:
            self.directory = self.home / path

    @property
    def file(self) -> Path:
        return self.directory / self.file_name

    def __repr__(self) -> str:
        return f"SettingsPaths({str(self.file)!r})"

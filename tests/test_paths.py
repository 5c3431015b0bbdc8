"""Tests for jsonsettings.paths."""

from pathlib import Path

from jsonsettings.paths import SettingsPaths, normalize_file_name


class TestNormalizeFileName:
    def test_appends_suffix(self):
        assert normalize_file_name("prefs") == "prefs.json"

    def test_keeps_suffix(self):
        assert normalize_file_name("prefs.json") == "prefs.json"


class TestSettingsPaths:
    def test_relative_to_home(self, tmp_path):
        p = SettingsPaths(".myapp", home=tmp_path)
        assert p.directory == tmp_path / ".myapp"
        assert p.file == tmp_path / ".myapp" / "settings.json"

    def test_default_home(self):
        p = SettingsPaths(".myapp")
        assert p.directory == Path.home() / ".myapp"

    def test_absolute(self, tmp_path):
        p = SettingsPaths(tmp_path / "conf", path_is_absolute=True, home="/nowhere")
        assert p.file == tmp_path / "conf" / "settings.json"

    def test_custom_file_name(self, tmp_path):
        p = SettingsPaths(".myapp", file_name="window", home=tmp_path)
        assert p.file == tmp_path / ".myapp" / "window.json"

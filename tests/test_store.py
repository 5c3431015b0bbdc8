"""Tests for jsonsettings.store."""

from jsonsettings.store import SettingsStore


class TestSettingsStore:
    def test_values_copied_from_initial(self):
        initial = {"a": {"b": 1}}
        store = SettingsStore(initial)
        initial["a"]["b"] = 2
        assert store.values == {"a": {"b": 1}}

    def test_values_do_not_alias_defaults(self):
        store = SettingsStore({"a": {"b": 1}})
        store.values["a"]["b"] = 2
        assert store.defaults == {"a": {"b": 1}}

    def test_defaults_returns_copy(self):
        store = SettingsStore({"a": [1]})
        store.defaults["a"].append(2)
        assert store.defaults == {"a": [1]}

    def test_merged_with_uses_current_values(self):
        store = SettingsStore({"a": 1, "b": 2})
        store.values["b"] = 3
        assert store.merged_with({"a": 10}) == {"a": 10, "b": 3}
        assert store.values == {"a": 1, "b": 3}

    def test_reset(self):
        store = SettingsStore({"a": 1})
        store.replace({"a": 2, "x": True})
        store.reset()
        assert store.values == {"a": 1}

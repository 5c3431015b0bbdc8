"""In-memory settings values plus the default snapshot they were seeded from."""

from __future__ import annotations

from typing import Any

from .jsonvalue import JsonValue, deep_copy, reconcile


class SettingsStore:
    """Holds the live value tree.

    ``values`` is mutated in place by the application. The default tree is
    copied on the way in and on the way out, so it never shares structure
    with ``values`` or with the caller's object.
    """

    def __init__(self, initial: Any) -> None:
        self._defaults: JsonValue = deep_copy(initial)
        self.values: JsonValue = deep_copy(initial)

    @property
    def defaults(self) -> JsonValue:
        return deep_copy(self._defaults)

    def merged_with(self, loaded: Any) -> JsonValue:
        """Return *loaded* reconciled over a copy of the current values."""
        return reconcile(self.values, loaded)

    def replace(self, values: JsonValue) -> None:
        self.values = values

    def reset(self) -> None:
        """Restore ``values`` to a fresh copy of the defaults."""
        self.values = deep_copy(self._defaults)

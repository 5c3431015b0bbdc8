"""JSON value model: structural copy and deep-merge reconciliation."""

from __future__ import annotations

from typing import Any, Union

JsonScalar = Union[str, int, float, bool, None]
JsonValue = Union[dict[str, "JsonValue"], list["JsonValue"], JsonScalar]

_SCALARS = (str, int, float, bool, type(None))


def is_mapping(value: Any) -> bool:
    """Return True if *value* is a JSON object (not an array, not null)."""
    return isinstance(value, dict)


def deep_copy(value: Any) -> JsonValue:
    """Return a structural copy of *value* using only JSON value types.

    Tuples become lists and mapping keys become strings, the same shape a
    JSON round-trip would produce. Anything else that JSON cannot
    represent raises ``TypeError``.
    """
    if isinstance(value, dict):
        return {str(k): deep_copy(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [deep_copy(v) for v in value]
    if isinstance(value, _SCALARS):
        return value
    raise TypeError(
        f"value of type {type(value).__name__} is not JSON-serializable"
    )


def _merge_into(target: dict[str, JsonValue], source: dict[str, Any]) -> None:
    for key, value in source.items():
        if is_mapping(value):
            existing = target.get(key)
            if not is_mapping(existing):
                existing = {}
                target[key] = existing
            _merge_into(existing, value)
        else:
            # arrays and scalars replace wholesale
            target[key] = deep_copy(value)


def reconcile(base: JsonValue, loaded: Any) -> JsonValue:
    """Merge a loaded (possibly partial) document over *base*.

    Keys only in *base* are kept, keys in both take the loaded value
    (recursing into nested objects), and keys only in *loaded* are added.
    Neither argument is mutated; the result is a fresh tree.

    If either root is not an object there is nothing to merge by key and
    a copy of *base* is returned unchanged.
    """
    result = deep_copy(base)
    if is_mapping(result) and is_mapping(loaded):
        _merge_into(result, loaded)
    return result

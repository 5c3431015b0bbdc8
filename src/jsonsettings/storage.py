"""Blocking file primitives for the settings document.

These raise the error kinds from :mod:`jsonsettings.errors` and never log;
reporting is left to the caller.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import (
    DirectoryAccessError,
    DirectoryCreateError,
    ParseError,
    ReadError,
    WriteError,
)
from .jsonvalue import JsonValue

INDENT = 2


def serialize(values: JsonValue, dense: bool = False) -> str:
    """Render *values* as JSON, indented unless *dense*."""
    if dense:
        return json.dumps(values, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(values, indent=INDENT, ensure_ascii=False)


def directory_exists(directory: Path) -> bool:
    """Stat *directory*.

    Returns False if it does not exist. Any other stat failure raises
    ``DirectoryAccessError``.
    """
    try:
        directory.stat()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise DirectoryAccessError(directory, exc) from exc
    return True


def ensure_directory(directory: Path) -> None:
    """Create *directory* and any missing parents."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(directory, exc) from exc


def encode_document(path: Path, values: JsonValue, dense: bool = False) -> str:
    """Serialize *values* for *path*, raising ``WriteError`` if they are not JSON-safe."""
    try:
        return serialize(values, dense)
    except (TypeError, ValueError, RecursionError) as exc:
        raise WriteError(path, exc) from exc


def write_document(path: Path, text: str) -> None:
    """Overwrite *path* with *text* (plain write, not write-and-rename)."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, exc) from exc


def read_document(path: Path) -> Any:
    """Read and parse the JSON document at *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, exc) from exc
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, oversized integers, or nesting past the recursion limit
        raise ParseError(path, exc) from exc

"""Typed settings persisted to a JSON file, with throttled async saves."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .errors import (
    DirectoryAccessError,
    DirectoryCreateError,
    ParseError,
    SettingsError,
)
from .jsonvalue import JsonValue, is_mapping
from .paths import DEFAULT_FILENAME, SettingsPaths
from .storage import (
    directory_exists,
    encode_document,
    ensure_directory,
    read_document,
    write_document,
)
from .store import SettingsStore
from .throttle import Throttle

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 100  # milliseconds


class SettingsLogger(Protocol):
    """Anything with the four leveled methods of ``logging.Logger``."""

    def debug(self, msg: str, *args: Any) -> Any: ...

    def info(self, msg: str, *args: Any) -> Any: ...

    def warning(self, msg: str, *args: Any) -> Any: ...

    def error(self, msg: str, *args: Any) -> Any: ...


@dataclass(frozen=True)
class SettingsConfig:
    """Resolved, immutable configuration of one ``Settings`` instance."""

    directory: Path
    file_path: Path
    timeout: int = DEFAULT_TIMEOUT
    dense: bool = False
    logger: SettingsLogger = field(default=log, repr=False, compare=False)


class Settings:
    """Settings backed by a JSON file under the user's home.

    The constructor loads the file synchronously, or writes the defaults
    if there is none yet. After that the application mutates ``values``
    directly and calls ``save()``. Storage failures are logged and never
    raised.

    Usage:
        settings = Settings({"theme": "dark", "recent": []}, ".myapp")
        settings.values["theme"] = "light"
        await settings.save()
    """

    def __init__(
        self,
        initial: Any,
        path: Path | str,
        *,
        file_name: str = DEFAULT_FILENAME,
        path_is_absolute: bool = False,
        timeout: int = DEFAULT_TIMEOUT,
        logger: SettingsLogger | None = None,
        dense: bool = False,
        home: Path | str | None = None,
    ) -> None:
        if timeout < 0:
            raise ValueError("timeout must be >= 0 milliseconds")
        self._store = SettingsStore(initial)
        paths = SettingsPaths(path, file_name, path_is_absolute, home)
        self.config = SettingsConfig(
            directory=paths.directory,
            file_path=paths.file,
            timeout=timeout,
            dense=dense,
            logger=logger if logger is not None else log,
        )
        self._log = self.config.logger
        self._throttle: Throttle | None = None
        if timeout:
            self._throttle = Throttle(
                timeout / 1000, self._write,
                on_cancel=self._write_blocking, logger=self._log,
            )
        self._write_lock = asyncio.Lock()

        self._log.info("created settings (at: %s)", self.config.file_path)
        self.load_sync()

    # ── Values ──────────────────────────────────────────────────────

    @property
    def values(self) -> JsonValue:
        """The live settings tree. Call ``save()`` after changing it."""
        return self._store.values

    @values.setter
    def values(self, values: JsonValue) -> None:
        self._store.replace(values)

    @property
    def defaults(self) -> JsonValue:
        return self._store.defaults

    def reset(self) -> None:
        """Restore the default values in memory (not persisted until ``save()``)."""
        self._store.reset()

    # ── Loading ─────────────────────────────────────────────────────

    def load_sync(self) -> None:
        """Blocking load, used once by the constructor.

        Creates the file from the current values when it does not exist.
        Prefer ``load()`` to revert to the stored values later on.
        """
        self._log.debug("loading settings...")
        if not self.config.file_path.exists():
            self._log.info("no settings file found, saving initial settings...")
            self._write_blocking()
            return

        try:
            loaded = read_document(self.config.file_path)
        except SettingsError as exc:
            self._log.error("%s", exc)
            return
        self._apply(loaded)

    async def load(self) -> None:
        """Reload from disk, reconciling the file over the current values."""
        self._log.debug("loading settings...")
        try:
            loaded = await asyncio.to_thread(read_document, self.config.file_path)
        except SettingsError as exc:
            self._log.error("%s", exc)
            return
        self._apply(loaded)

    def _apply(self, loaded: Any) -> None:
        if not is_mapping(loaded):
            self._log.warning(
                "settings root in %s is not a JSON object, ignoring",
                self.config.file_path,
            )
            return
        try:
            merged = self._store.merged_with(loaded)
        except RecursionError as exc:
            self._log.error("%s", ParseError(self.config.file_path, exc))
            return
        self._store.replace(merged)
        self._log.info("loaded settings")

    # ── Saving ──────────────────────────────────────────────────────

    async def save(self) -> None:
        """Persist the current values.

        With ``timeout=0`` this waits for the write. Otherwise it only
        schedules one, and bursts of calls collapse into a single write
        per window.
        """
        if self._throttle is None:
            await self._write()
        else:
            self._throttle.request()

    async def flush(self) -> None:
        """Wait for any scheduled or in-flight throttled write to finish."""
        if self._throttle is not None:
            await self._throttle.wait()

    async def _write(self) -> bool:
        # one write in flight; serialize on the loop thread so the snapshot
        # matches the moment the lock is taken
        async with self._write_lock:
            text = self._encode()
            if text is None:
                return False
            return await asyncio.to_thread(self._persist, text)

    def _write_blocking(self) -> bool:
        text = self._encode()
        if text is None:
            return False
        return self._persist(text)

    def _encode(self) -> str | None:
        try:
            return encode_document(
                self.config.file_path, self._store.values, self.config.dense,
            )
        except SettingsError as exc:
            self._log.error("%s", exc)
            return None

    def _persist(self, text: str) -> bool:
        self._log.debug("saving settings...")
        directory = self.config.directory
        try:
            present = directory_exists(directory)
        except DirectoryAccessError as exc:
            self._log.warning("%s", exc)
            present = True
        if not present:
            self._log.info("settings directory missing, creating %s", directory)
            try:
                ensure_directory(directory)
            except DirectoryCreateError as exc:
                self._log.error("%s", exc)

        try:
            write_document(self.config.file_path, text)
        except SettingsError as exc:
            self._log.error("%s", exc)
            return False
        self._log.info("saved settings")
        return True

"""Local disk implementations of the I/O interfaces."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import stat as stat_module
from pathlib import Path
from typing import Any, Sequence

from ..interfaces import FileStat, FileSystem, FileSystemError, PreferenceStore

LOGGER = logging.getLogger(__name__)

DECODE_ERROR = "EDECODE"


def _stat(path: str) -> FileStat:
    try:
        result = os.stat(path)
    except OSError as exc:
        raise FileSystemError.from_os_error(exc, path) from exc
    return FileStat(
        is_directory=stat_module.S_ISDIR(result.st_mode),
        is_file=stat_module.S_ISREG(result.st_mode),
    )


def _make_directory(path: str, mode: int) -> None:
    try:
        os.mkdir(path, mode)
    except OSError as exc:
        raise FileSystemError.from_os_error(exc, path) from exc


def _list_directory(path: str) -> list[str]:
    try:
        return sorted(os.listdir(path))
    except OSError as exc:
        raise FileSystemError.from_os_error(exc, path) from exc


def _read_file(path: str, encoding: str) -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FileSystemError.from_os_error(exc, path) from exc
    except UnicodeDecodeError as exc:
        raise FileSystemError(DECODE_ERROR, path) from exc


def _write_file(path: str, contents: str, encoding: str) -> None:
    try:
        with open(path, "w", encoding=encoding, newline="") as handle:
            handle.write(contents)
    except OSError as exc:
        raise FileSystemError.from_os_error(exc, path) from exc


class LocalFileSystem(FileSystem):
    """Run blocking ``os`` calls on worker threads."""

    async def stat(self, path: str) -> FileStat:
        return await asyncio.to_thread(_stat, path)

    async def make_directory(self, path: str, mode: int = 0o777) -> None:
        await asyncio.to_thread(_make_directory, path, mode)

    async def list_directory(self, path: str) -> Sequence[str]:
        return await asyncio.to_thread(_list_directory, path)

    async def read_file(self, path: str, encoding: str = "utf-8") -> str:
        return await asyncio.to_thread(_read_file, path, encoding)

    async def write_file(self, path: str, contents: str, encoding: str = "utf-8") -> None:
        await asyncio.to_thread(_write_file, path, contents, encoding)


class JsonPreferenceStore(PreferenceStore):
    """Persist preferences as a flat JSON object on disk.

    A missing or unreadable file behaves like an empty store.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._values = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("ignoring unreadable preferences file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("ignoring preferences file %s: expected a JSON object", self._path)
            return {}
        return data

    def get_value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(self._values, ensure_ascii=False, sort_keys=True, indent=2),
            encoding="utf-8",
        )


__all__ = ["DECODE_ERROR", "JsonPreferenceStore", "LocalFileSystem"]

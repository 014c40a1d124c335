"""Abstract interfaces for the filesystem and preference collaborators."""

from __future__ import annotations

import errno
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Sequence

NOT_FOUND = "ENOENT"
UNKNOWN = "EUNKNOWN"


class FileSystemError(OSError):
    """I/O failure reported by a :class:`FileSystem` implementation."""

    def __init__(self, code: str, path: str) -> None:
        super().__init__(f"{code}: {path}")
        self.code = code
        self.path = path

    @property
    def not_found(self) -> bool:
        return self.code == NOT_FOUND

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> "FileSystemError":
        """Translate ``exc`` into an errno-symbol coded error."""

        code = errno.errorcode.get(exc.errno or 0, UNKNOWN)
        return cls(code, path)


@dataclass(frozen=True, slots=True)
class FileStat:
    """Result of a successful :meth:`FileSystem.stat` call."""

    is_directory: bool
    is_file: bool


class FileSystem(ABC):
    """Asynchronous filesystem provider.

    Every method may suspend. Failures are raised as :class:`FileSystemError`.
    """

    @abstractmethod
    async def stat(self, path: str) -> FileStat:
        """Describe ``path``; raises with ``ENOENT`` when it does not exist."""

    @abstractmethod
    async def make_directory(self, path: str, mode: int = 0o777) -> None:
        """Create a single directory. Parents are never created."""

    @abstractmethod
    async def list_directory(self, path: str) -> Sequence[str]:
        """Return the entry names contained in ``path``."""

    @abstractmethod
    async def read_file(self, path: str, encoding: str = "utf-8") -> str:
        """Return the full text content of ``path``."""

    @abstractmethod
    async def write_file(self, path: str, contents: str, encoding: str = "utf-8") -> None:
        """Create or replace ``path`` with ``contents``."""


class PreferenceStore(ABC):
    """Key/value storage that survives between command invocations."""

    @abstractmethod
    def get_value(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default``."""

    @abstractmethod
    def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""


__all__ = [
    "FileStat",
    "FileSystem",
    "FileSystemError",
    "NOT_FOUND",
    "PreferenceStore",
    "UNKNOWN",
]

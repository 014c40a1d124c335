"""I/O interfaces and schemas for newproject."""

from .interfaces import FileStat, FileSystem, FileSystemError, PreferenceStore
from .schema import CopyOutcome, ScaffoldResult, ScaffoldState

__all__ = [
    "CopyOutcome",
    "FileStat",
    "FileSystem",
    "FileSystemError",
    "PreferenceStore",
    "ScaffoldResult",
    "ScaffoldState",
]

"""Concrete I/O adapter implementations."""

from .local import JsonPreferenceStore, LocalFileSystem

__all__ = ["JsonPreferenceStore", "LocalFileSystem"]

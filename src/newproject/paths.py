"""Separator-aware path string helpers.

Paths move around this package as plain strings in one of two forms: the
canonical form, which always uses forward slashes, and the platform form,
which uses whatever separator the selected :class:`SeparatorStyle` prescribes.
"""

from __future__ import annotations

import os
from enum import Enum

__all__ = [
    "SeparatorStyle",
    "base_name",
    "current_style",
    "ensure_trailing_separator",
    "join",
    "to_canonical_form",
    "to_platform_form",
]


CANONICAL_SEPARATOR = "/"


class SeparatorStyle(str, Enum):
    """Path separator conventions understood by the normalizer."""

    POSIX = "posix"
    WINDOWS = "windows"


_SEPARATORS: dict[SeparatorStyle, str] = {
    SeparatorStyle.POSIX: "/",
    SeparatorStyle.WINDOWS: "\\",
}


def current_style() -> SeparatorStyle:
    """Return the separator style of the running interpreter."""

    return SeparatorStyle.WINDOWS if os.name == "nt" else SeparatorStyle.POSIX


def separator_for(style: SeparatorStyle | None = None) -> str:
    return _SEPARATORS[style or current_style()]


def to_platform_form(path: str, *, style: SeparatorStyle | None = None) -> str:
    """Replace canonical separators with the platform separator."""

    separator = separator_for(style)
    if separator == CANONICAL_SEPARATOR:
        return path
    return path.replace(CANONICAL_SEPARATOR, separator)


def to_canonical_form(path: str, *, style: SeparatorStyle | None = None) -> str:
    """Replace platform separators with forward slashes."""

    separator = separator_for(style)
    if separator == CANONICAL_SEPARATOR:
        return path
    return path.replace(separator, CANONICAL_SEPARATOR)


def ensure_trailing_separator(path: str, *, style: SeparatorStyle | None = None) -> str:
    """Append the platform separator to ``path`` unless it already ends with one.

    Empty strings are returned unchanged.
    """

    if not path:
        return path
    separator = separator_for(style)
    if path.endswith(separator):
        return path
    return path + separator


def base_name(path: str, *, style: SeparatorStyle | None = None) -> str:
    """Return everything after the last platform separator in ``path``."""

    separator = separator_for(style)
    return path[path.rfind(separator) + 1 :]


def join(directory: str, name: str, *, style: SeparatorStyle | None = None) -> str:
    return ensure_trailing_separator(directory, style=style) + name

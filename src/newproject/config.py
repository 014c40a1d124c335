"""Settings shared by the new project command and CLI."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .scaffold import DEFAULT_ENTRY_FILE

APP_NAME = "newproject"
TEMPLATE_DIR_ENV = "NEWPROJECT_TEMPLATE_DIR"
PREFERENCES_ENV = "NEWPROJECT_PREFERENCES"


def support_directory(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
    home: Path | None = None,
) -> Path:
    """Return the per-user application support directory for this tool."""

    environ = os.environ if environ is None else environ
    platform = platform or sys.platform
    home = home or Path.home()

    if platform.startswith("win"):
        base = Path(environ["APPDATA"]) if environ.get("APPDATA") else home / "AppData" / "Roaming"
    elif platform == "darwin":
        base = home / "Library" / "Application Support"
    else:
        xdg = environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else home / ".local" / "share"
    return base / APP_NAME


@dataclass(slots=True)
class ScaffoldSettings:
    """Locations used when creating new projects.

    Attributes
    ----------
    template_dir:
        Directory whose files are copied into every new project.
    default_parent:
        Folder offered as the parent of a new project when no folder has been
        remembered yet.
    preferences_path:
        JSON file backing the preference store.
    entry_file:
        Name of the file opened after a successful scaffold.
    """

    template_dir: Path
    default_parent: Path
    preferences_path: Path
    entry_file: str = DEFAULT_ENTRY_FILE

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        platform: str | None = None,
        home: Path | None = None,
    ) -> "ScaffoldSettings":
        """Build settings from the environment, falling back to per-user defaults."""

        environ = os.environ if environ is None else environ
        home = home or Path.home()
        support = support_directory(environ, platform=platform, home=home)

        template_override = environ.get(TEMPLATE_DIR_ENV, "").strip()
        preferences_override = environ.get(PREFERENCES_ENV, "").strip()

        return cls(
            template_dir=Path(template_override) if template_override else support / "templates",
            default_parent=home / "Documents",
            preferences_path=(
                Path(preferences_override) if preferences_override else support / "preferences.json"
            ),
        )

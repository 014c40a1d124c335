"""Create new project folders from a directory of template files.

The package exposes separator-aware path helpers, an asynchronous scaffolder
that copies every template file into a freshly created project directory, and
a small command layer that tracks the untitled-project counter and remembered
parent folder between runs.
"""

from __future__ import annotations

from .command import NewProjectRequest, load_state, run_new_project, save_state
from .config import ScaffoldSettings
from .errors import (
    CopyError,
    DestinationFileExistsError,
    DirectoryCreateFailedError,
    ParentNotDirectoryError,
    ReadFailedError,
    ScaffoldError,
    TemplateListFailedError,
    WriteFailedError,
)
from .io.schema import CopyOutcome, ScaffoldResult, ScaffoldState
from .paths import SeparatorStyle
from .scaffold import ProjectScaffolder

__all__ = [
    "CopyError",
    "CopyOutcome",
    "DestinationFileExistsError",
    "DirectoryCreateFailedError",
    "NewProjectRequest",
    "ParentNotDirectoryError",
    "ProjectScaffolder",
    "ReadFailedError",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldSettings",
    "ScaffoldState",
    "SeparatorStyle",
    "TemplateListFailedError",
    "WriteFailedError",
    "load_state",
    "run_new_project",
    "save_state",
]

__version__ = "0.1.0"

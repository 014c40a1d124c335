"""The "New Project" command: collected input and state in, new state out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .io.interfaces import PreferenceStore
from .io.schema import ScaffoldResult, ScaffoldState
from .paths import to_canonical_form
from .scaffold import ProjectScaffolder

__all__ = [
    "ORDINAL_KEY",
    "PARENT_FOLDER_KEY",
    "NewProjectRequest",
    "choose_parent",
    "load_state",
    "run_new_project",
    "save_state",
]


LOGGER = logging.getLogger(__name__)

ORDINAL_KEY = "newProjectOrdinal"
PARENT_FOLDER_KEY = "newProjectsFolder"


@dataclass(slots=True)
class NewProjectRequest:
    """Parent folder and project name collected from the user."""

    parent: str
    name: str = ""

    def project_name(self, state: ScaffoldState) -> str:
        name = self.name.strip()
        return name or state.default_project_name

    def destination(self, state: ScaffoldState) -> str:
        return to_canonical_form(self.parent).rstrip("/") + "/" + self.project_name(state)


def _coerce_ordinal(value: Any) -> int:
    if isinstance(value, bool):
        return 1
    try:
        ordinal = int(value)
    except (TypeError, ValueError):
        return 1
    return ordinal if ordinal >= 1 else 1


def load_state(store: PreferenceStore) -> ScaffoldState:
    """Read the command state from ``store``, defaulting invalid values."""

    folder = store.get_value(PARENT_FOLDER_KEY)
    return ScaffoldState(
        ordinal=_coerce_ordinal(store.get_value(ORDINAL_KEY, 1)),
        parent_folder=folder if isinstance(folder, str) and folder else None,
    )


def choose_parent(state: ScaffoldState, folder: str) -> ScaffoldState:
    """Return ``state`` remembering ``folder`` as the preferred parent."""

    return state.model_copy(update={"parent_folder": to_canonical_form(folder)})


def save_state(store: PreferenceStore, state: ScaffoldState) -> None:
    store.set_value(ORDINAL_KEY, state.ordinal)
    if state.parent_folder:
        store.set_value(PARENT_FOLDER_KEY, state.parent_folder)


async def run_new_project(
    scaffolder: ProjectScaffolder,
    request: NewProjectRequest,
    state: ScaffoldState,
) -> tuple[ScaffoldResult, ScaffoldState]:
    """Scaffold the requested project and return the result with the next state.

    A :class:`~newproject.errors.ScaffoldError` propagates and the caller keeps
    ``state``.
    """

    destination = request.destination(state)
    LOGGER.info("creating project %s", destination)
    result = await scaffolder.create(request.parent, destination)

    entry = await scaffolder.open_entry_file(result.project_dir)
    if entry is not None:
        result = result.model_copy(update={"entry_file": entry})
    return result, state.advance()

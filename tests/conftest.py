from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from newproject.scaffold import ProjectScaffolder  # noqa: E402


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "templates"
    directory.mkdir()
    return directory


@pytest.fixture()
def parent_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "projects"
    directory.mkdir()
    return directory


@pytest.fixture()
def opened() -> list[str]:
    return []


@pytest.fixture()
def scaffolder(template_dir: Path, opened: list[str]) -> ProjectScaffolder:
    return ProjectScaffolder(str(template_dir), open_file=opened.append)

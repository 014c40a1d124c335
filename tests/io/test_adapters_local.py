from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from newproject.io.adapters.local import JsonPreferenceStore, LocalFileSystem
from newproject.io.interfaces import FileSystemError


def test_stat_distinguishes_files_and_directories(tmp_path: Path):
    filesystem = LocalFileSystem()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    directory = asyncio.run(filesystem.stat(str(tmp_path)))
    regular = asyncio.run(filesystem.stat(str(tmp_path / "file.txt")))

    assert directory.is_directory and not directory.is_file
    assert regular.is_file and not regular.is_directory


def test_stat_missing_path_is_not_found(tmp_path: Path):
    with pytest.raises(FileSystemError) as excinfo:
        asyncio.run(LocalFileSystem().stat(str(tmp_path / "missing")))

    assert excinfo.value.not_found
    assert excinfo.value.code == "ENOENT"


def test_make_directory_is_not_recursive(tmp_path: Path):
    filesystem = LocalFileSystem()

    with pytest.raises(FileSystemError) as excinfo:
        asyncio.run(filesystem.make_directory(str(tmp_path / "a" / "b")))
    assert excinfo.value.not_found

    asyncio.run(filesystem.make_directory(str(tmp_path / "a")))
    with pytest.raises(FileSystemError) as excinfo:
        asyncio.run(filesystem.make_directory(str(tmp_path / "a")))
    assert excinfo.value.code == "EEXIST"
    assert not excinfo.value.not_found


def test_list_directory_is_sorted(tmp_path: Path):
    for name in ("b.txt", "a.txt", "c"):
        (tmp_path / name).write_text(name, encoding="utf-8")

    assert asyncio.run(LocalFileSystem().list_directory(str(tmp_path))) == ["a.txt", "b.txt", "c"]


def test_read_and_write_round_trip_text(tmp_path: Path):
    filesystem = LocalFileSystem()
    target = str(tmp_path / "out.txt")

    asyncio.run(filesystem.write_file(target, "line\r\nnext ☕"))

    assert asyncio.run(filesystem.read_file(target)) == "line\r\nnext ☕"


def test_json_preference_store_persists_values(tmp_path: Path):
    path = tmp_path / "nested" / "prefs.json"
    store = JsonPreferenceStore(path)
    assert store.get_value("missing", 5) == 5

    store.set_value("newProjectOrdinal", 4)

    assert json.loads(path.read_text(encoding="utf-8")) == {"newProjectOrdinal": 4}
    assert JsonPreferenceStore(path).get_value("newProjectOrdinal") == 4


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_json_preference_store_ignores_bad_files(tmp_path: Path, content: str):
    path = tmp_path / "prefs.json"
    path.write_text(content, encoding="utf-8")

    assert JsonPreferenceStore(path).get_value("newProjectOrdinal") is None

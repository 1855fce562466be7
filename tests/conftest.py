"""Shared fixtures: an in-memory storage port and sample sessions."""

from __future__ import annotations

from pathlib import Path

import pytest

from file_triage.core.engine import TriageEngine
from file_triage.core.errors import AlreadyExistsError, NotFoundError
from file_triage.core.storage import LocalStorage, StoragePort


class InMemoryStorage(StoragePort):
    """StoragePort over a set of paths, recording every call."""

    def __init__(self, folders: list[Path] | None = None, files: list[Path] | None = None) -> None:
        self.folders: set[Path] = set(folders or [])
        self.files: set[Path] = set(files or [])
        self.calls: list[tuple[str, tuple[Path, ...]]] = []

    def list(self, directory: Path) -> tuple[list[Path], list[Path]]:
        self.calls.append(("list", (directory,)))
        if directory.name == "missing":
            raise NotFoundError(f"Directory not found: {directory}")
        return sorted(self.folders), sorted(self.files)

    def rename(self, source: Path, destination: Path) -> None:
        self.calls.append(("rename", (source, destination)))
        if source not in self.files:
            raise NotFoundError(f"Source file not found: {source}")
        if destination in self.files:
            raise AlreadyExistsError(f"Destination already exists: {destination}")
        self.files.remove(source)
        self.files.add(destination)

    def remove(self, file: Path) -> None:
        self.calls.append(("remove", (file,)))
        if file not in self.files:
            raise NotFoundError(f"File not found: {file}")
        self.files.remove(file)

    def resolve_folder(self, path: Path) -> Path:
        self.calls.append(("resolve_folder", (path,)))
        if path not in self.folders:
            raise NotFoundError(f"Folder not found: {path}")
        return path


def build_folders() -> list[Path]:
    return [Path("./folder1"), Path("./folder2"), Path("./folder3")]


def build_files() -> list[Path]:
    return [Path("./file1.png"), Path("./file2.png"), Path("./file3.png")]


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage(folders=build_folders(), files=build_files())


@pytest.fixture
def engine(storage: InMemoryStorage) -> TriageEngine:
    """Engine loaded with three files and three folders."""
    triage = TriageEngine(storage)
    triage.load("./testFolder")
    return triage


@pytest.fixture
def photo_dir(tmp_path: Path) -> Path:
    """Directory with a.jpg, b.jpg and a dest/ folder."""
    root = tmp_path / "photos"
    root.mkdir()
    (root / "a.jpg").write_bytes(b"image a")
    (root / "b.jpg").write_bytes(b"image b")
    (root / "dest").mkdir()
    return root


@pytest.fixture
def local_engine(photo_dir: Path) -> TriageEngine:
    triage = TriageEngine(LocalStorage())
    triage.load(photo_dir)
    return triage

"""Storage port and the local filesystem adapter.

The engine performs all I/O through a ``StoragePort``. ``LocalStorage`` is
the real implementation; tests substitute an in-memory one.
Nothing here ever overwrites an existing path.
"""

from __future__ import annotations

import abc
import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from file_triage.core.errors import AlreadyExistsError, NotFoundError, StorageError

if TYPE_CHECKING:
    from file_triage.core.settings import TriageSettings

logger = logging.getLogger(__name__)


class StoragePort(abc.ABC):
    """Filesystem capabilities the triage engine depends on."""

    @abc.abstractmethod
    def list(self, directory: Path) -> tuple[list[Path], list[Path]]:
        """List a directory.

        Args:
            directory: Directory to enumerate.

        Returns:
            Tuple of (folders, files), each sorted.

        Raises:
            NotFoundError: If the directory is missing or unreadable.
        """

    @abc.abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """Relocate ``source`` to ``destination``.

        Raises:
            NotFoundError: If source does not exist.
            AlreadyExistsError: If destination already exists.
        """

    @abc.abstractmethod
    def remove(self, file: Path) -> None:
        """Delete a file.

        Raises:
            NotFoundError: If the file does not exist.
        """

    @abc.abstractmethod
    def resolve_folder(self, path: Path) -> Path:
        """Validate an existing folder and return it unchanged.

        Raises:
            NotFoundError: If the folder does not exist.
        """


class LocalStorage(StoragePort):
    """StoragePort backed by the local filesystem.

    Attributes:
        skip_hidden: If True, dot-entries are left out of listings.
        create_missing_parents: If True, rename creates the destination's
            parent directories instead of failing.
    """

    def __init__(self, *, skip_hidden: bool = False, create_missing_parents: bool = False) -> None:
        self.skip_hidden = skip_hidden
        self.create_missing_parents = create_missing_parents

    @classmethod
    def from_settings(cls, settings: TriageSettings) -> LocalStorage:
        """Create a LocalStorage configured from saved settings.

        Args:
            settings: Loaded settings.

        Returns:
            A new LocalStorage instance.
        """
        return cls(
            skip_hidden=settings.skip_hidden,
            create_missing_parents=settings.create_missing_parents,
        )

    def list(self, directory: Path) -> tuple[list[Path], list[Path]]:
        if not directory.exists():
            raise NotFoundError(f"Directory not found: {directory}")
        if not directory.is_dir():
            raise NotFoundError(f"Path is not a directory: {directory}")

        folders: list[Path] = []
        files: list[Path] = []
        try:
            for item in directory.iterdir():
                if self.skip_hidden and item.name.startswith("."):
                    continue
                if item.is_dir():
                    folders.append(item)
                else:
                    files.append(item)
        except PermissionError as e:
            raise NotFoundError(f"Directory not readable: {directory}") from e
        except OSError as e:
            logger.warning(f"Error listing {directory}: {e}")
            raise StorageError(f"Failed to list {directory}: {e}") from e

        folders.sort()
        files.sort()
        return folders, files

    def rename(self, source: Path, destination: Path) -> None:
        if not os.path.lexists(source):
            raise NotFoundError(f"Source file not found: {source}")

        if os.path.lexists(destination):
            raise AlreadyExistsError(f"Destination already exists: {destination}")

        if not destination.parent.exists():
            if not self.create_missing_parents:
                raise NotFoundError(f"Destination folder not found: {destination.parent}")
            destination.parent.mkdir(parents=True, exist_ok=True)

        try:
            shutil.move(str(source), str(destination))
        except OSError as e:
            logger.warning(f"Error moving {source} to {destination}: {e}")
            raise StorageError(f"Failed to move {source} to {destination}: {e}") from e

    def remove(self, file: Path) -> None:
        if not (file.is_symlink() or file.is_file()):
            raise NotFoundError(f"File not found: {file}")

        try:
            file.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(f"File not found: {file}") from e
        except OSError as e:
            logger.warning(f"Error removing {file}: {e}")
            raise StorageError(f"Failed to remove {file}: {e}") from e

    def resolve_folder(self, path: Path) -> Path:
        if not path.is_dir():
            raise NotFoundError(f"Folder not found: {path}")
        return path

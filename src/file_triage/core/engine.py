"""Triage engine: walk a directory's files and decide each one's fate.

The engine owns the file list, the folder list, a cursor into the files and
two command histories. Moving or skipping a file advances the cursor and
records a command that undo/redo can replay. Deleting records a ``Skip``
sentinel; deletions cannot be undone.

All I/O goes through the injected ``StoragePort``. On failure the engine's
state is left as it was, except where a move or redo commits before the
cursor hits the end of the files.
"""

from __future__ import annotations

import functools
import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Callable, TypeVar

from file_triage.core.commands import Command, Move, Skip
from file_triage.core.errors import EndOfFilesError, InvalidDataError, NotFoundError

if TYPE_CHECKING:
    from file_triage.core.storage import StoragePort

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., object])


def _serialized(method: _F) -> _F:
    """Run an engine method while holding the engine's lock."""

    @functools.wraps(method)
    def wrapper(self: TriageEngine, *args: object, **kwargs: object) -> object:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _clean_path(path: str | Path) -> Path:
    if isinstance(path, str):
        path = path.strip()
    return Path(path)


class TriageEngine:
    """Decision-history engine over one directory of files.

    Attributes:
        storage: Storage port used for every filesystem operation.
    """

    def __init__(self, storage: StoragePort) -> None:
        """Initialize an empty session.

        Args:
            storage: Storage port to perform I/O through.
        """
        self.storage = storage
        self._files: list[Path] = []
        self._folders: list[Path] = []
        self._pwd = ""
        self._cursor = 0
        self._undo_stack: list[Command] = []
        self._redo_stack: list[Command] = []
        self._end_of_files = False
        self._lock = threading.RLock()

    @property
    def files(self) -> list[Path]:
        """Copy of the files loaded for triage."""
        return list(self._files)

    @property
    def folders(self) -> list[Path]:
        """Copy of the folders files can be moved into."""
        return list(self._folders)

    @property
    def pwd(self) -> str:
        """Directory the files were loaded from."""
        return self._pwd

    @property
    def cursor(self) -> int:
        """Index of the current file."""
        return self._cursor

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def undo_stack(self) -> tuple[Command, ...]:
        """Commands that can be undone, oldest first."""
        return tuple(self._undo_stack)

    @property
    def redo_stack(self) -> tuple[Command, ...]:
        """Commands that can be redone, oldest first."""
        return tuple(self._redo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def at_end_of_files(self) -> bool:
        """True if the last advance hit the end of the files."""
        return self._end_of_files

    @_serialized
    def current_file(self) -> Path | None:
        """Return the current file, or None if the cursor is out of bounds."""
        if self._cursor >= len(self._files):
            return None
        return self._files[self._cursor]

    @_serialized
    def load(self, directory: str | Path) -> None:
        """Load all files and folders in a directory.

        Previously loaded files and folders are replaced, the cursor goes
        back to the first file and both histories are cleared.

        Args:
            directory: Directory to load.

        Raises:
            NotFoundError: If the directory cannot be listed.
        """
        path = _clean_path(directory)
        folders, files = self.storage.list(path)

        self._folders = list(folders)
        self._files = list(files)
        self._pwd = str(directory).strip()
        self._cursor = 0
        self._undo_stack = []
        self._redo_stack = []
        self._end_of_files = False
        logger.info(f"Loaded {len(self._files)} files and {len(self._folders)} folders from {path}")

    @_serialized
    def load_external_folders(self, directory: str | Path) -> None:
        """Replace the folders with those found in another directory.

        Files, cursor and history are kept, so files from one directory
        can be sorted into folders elsewhere on the filesystem.

        Raises:
            NotFoundError: If the directory cannot be listed.
        """
        path = _clean_path(directory)
        folders, _ = self.storage.list(path)
        self._folders = list(folders)
        logger.info(f"Loaded {len(self._folders)} external folders from {path}")

    @_serialized
    def add_folder(self, path: str | Path) -> None:
        """Add a single folder that files can be moved into.

        Raises:
            NotFoundError: If the folder does not exist.
        """
        folder = self.storage.resolve_folder(_clean_path(path))
        self._folders.append(folder)

    @_serialized
    def clear_folders(self) -> None:
        self._folders = []

    @_serialized
    def move_current(self, destination_folder: str | Path) -> None:
        """Move the current file into a folder and advance.

        Args:
            destination_folder: Folder to move the current file into.

        Raises:
            NotFoundError: If no files are loaded, or the storage can't find
                the file or folder.
            InvalidDataError: If the current path has no file name.
            AlreadyExistsError: If the folder already holds a file by that name.
            EndOfFilesError: If this was the last file. The move has
                still been performed and recorded.
        """
        source = self.current_file()
        if source is None:
            raise NotFoundError("No current file to move")

        destination = self._build_destination(_clean_path(destination_folder), source)
        self.storage.rename(source, destination)
        logger.info(f"Moved {source} to {destination}")

        self._record(Move(source, destination, self.storage))
        self._advance()

    @_serialized
    def skip_current(self) -> None:
        """Leave the current file in place and advance.

        Raises:
            EndOfFilesError: If already at the last file. Nothing is recorded.
        """
        self._advance()
        self._record(Skip())
        logger.debug(f"Skipped to file {self._cursor}")

    @_serialized
    def delete_current(self) -> None:
        """Delete the current file.

        The cursor stays where it is and the deletion cannot be undone;
        a Skip is recorded so undo/redo bookkeeping stays aligned.
        """
        file = self.current_file()
        if file is None:
            return

        self.storage.remove(file)
        logger.info(f"Deleted {file}")
        self._record(Skip())

    @_serialized
    def undo(self) -> None:
        """Undo the most recent decision.

        If the last advance hit the end of the files, the cursor stays on
        the last file instead of stepping back.
        """
        if not self._undo_stack:
            return

        command = self._undo_stack[-1]
        command.undo()
        self._redo_stack.append(self._undo_stack.pop())

        if self._end_of_files:
            self._end_of_files = False
        elif self._cursor > 0:
            self._cursor -= 1
        logger.debug(f"Undid {command.operation_type}, cursor at {self._cursor}")

    @_serialized
    def redo(self) -> None:
        """Redo the most recently undone decision.

        Raises:
            EndOfFilesError: If redoing reaches the end of the files. The
                command has still been replayed.
        """
        if not self._redo_stack:
            return

        command = self._redo_stack[-1]
        command.redo()
        self._undo_stack.append(self._redo_stack.pop())
        logger.debug(f"Redid {command.operation_type}")
        self._advance()

    def _record(self, command: Command) -> None:
        self._undo_stack.append(command)
        self._redo_stack.clear()

    def _advance(self) -> None:
        if self._cursor + 1 >= len(self._files):
            self._end_of_files = True
            raise EndOfFilesError(f"No file after index {self._cursor}")
        self._cursor += 1

    @staticmethod
    def _build_destination(folder: Path, source: Path) -> Path:
        if not source.name:
            raise InvalidDataError(f"Path has no file name: {source}")
        return folder / source.name

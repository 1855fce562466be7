"""File Triage — Undoable engine for sorting loose files into folders one at a time."""

from file_triage.core import (
    AlreadyExistsError,
    EndOfFilesError,
    InvalidDataError,
    LocalStorage,
    NotFoundError,
    StoragePort,
    TriageEngine,
    TriageError,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "EndOfFilesError",
    "InvalidDataError",
    "LocalStorage",
    "NotFoundError",
    "StoragePort",
    "TriageEngine",
    "TriageError",
]

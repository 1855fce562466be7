"""Core business logic for File Triage."""

from file_triage.core.errors import (
    AlreadyExistsError,
    EndOfFilesError,
    InvalidDataError,
    NotFoundError,
    StorageError,
    TriageError,
)
from file_triage.core.storage import (
    LocalStorage,
    StoragePort,
)
from file_triage.core.commands import (
    Command,
    Move,
    Skip,
)
from file_triage.core.engine import TriageEngine
from file_triage.core.settings import (
    TriageSettings,
    get_default_settings_path,
)

__all__ = [
    # errors
    "AlreadyExistsError",
    "EndOfFilesError",
    "InvalidDataError",
    "NotFoundError",
    "StorageError",
    "TriageError",
    # storage
    "LocalStorage",
    "StoragePort",
    # commands
    "Command",
    "Move",
    "Skip",
    # engine
    "TriageEngine",
    # settings
    "TriageSettings",
    "get_default_settings_path",
]

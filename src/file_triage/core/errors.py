"""Error taxonomy for triage operations.

Every fallible operation raises one of these. The filesystem-flavoured
errors also derive from the matching builtin so callers can catch either.
"""

from __future__ import annotations


class TriageError(Exception):
    """Base exception for triage errors."""


class NotFoundError(TriageError, FileNotFoundError):
    """Raised when a directory, file or folder does not exist."""


class AlreadyExistsError(TriageError, FileExistsError):
    """Raised when a rename destination already exists."""


class InvalidDataError(TriageError, ValueError):
    """Raised when a file path has no name component."""


class EndOfFilesError(TriageError):
    """Raised when the cursor would advance past the last file.

    This is an expected terminal condition, recoverable with undo.
    """


class StorageError(TriageError):
    """Raised when the filesystem fails for any other reason."""

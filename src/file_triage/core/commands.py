"""Reversible commands recorded on the engine's undo/redo stacks."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from file_triage.core.storage import StoragePort


class Command(abc.ABC):
    """A single triage decision that can be undone and redone."""

    operation_type: str = ""

    @abc.abstractmethod
    def undo(self) -> None:
        """Revert the decision."""

    @abc.abstractmethod
    def redo(self) -> None:
        """Re-apply the decision."""


@dataclass(frozen=True)
class Move(Command):
    """Relocation of one file into a folder.

    Attributes:
        source: Location before the move.
        destination: Location after the move.
        storage: Storage the move was performed through.
    """

    source: Path
    destination: Path
    storage: StoragePort = field(repr=False, compare=False)
    operation_type: str = field(default="move", init=False)

    def undo(self) -> None:
        self.storage.rename(self.destination, self.source)

    def redo(self) -> None:
        self.storage.rename(self.source, self.destination)


class Skip(Command):
    """Placeholder for a skip or a delete.

    Carries no data; the engine moves the cursor.
    """

    operation_type = "skip"

    def undo(self) -> None:
        pass

    def redo(self) -> None:
        pass

    def __repr__(self) -> str:
        return "Skip()"

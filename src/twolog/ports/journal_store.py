"""Journal storage interface."""

from datetime import date
from pathlib import Path
from typing import Protocol


class JournalStore(Protocol):
    """Interface for reading and writing daily notes."""

    def path_for(self, target_date: date) -> Path:
        """Location of the note for a date."""
        ...

    def validate(self, writable: bool = True) -> None:
        """Raise if the journal directory is missing (or not writable)."""
        ...

    def read(self, target_date: date) -> str | None:
        """Read note content for a date. Returns None if not found."""
        ...

    def write(self, target_date: date, content: str) -> None:
        """Write/overwrite note content for a date."""
        ...

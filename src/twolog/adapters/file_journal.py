"""File-based journal storage adapter."""

import logging
import os
from datetime import date
from pathlib import Path

from ..errors import ErrorKind, TwoLogError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file named
    ``YYYY-MM-DD.md``. The journal directory is never created here; it has
    to exist already.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    def path_for(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.journal_dir / f"{target_date.isoformat()}.md"

    def validate(self, writable: bool = True) -> None:
        """Check that the journal directory exists and, optionally, is writable."""
        if not self.journal_dir.is_dir():
            raise TwoLogError(
                ErrorKind.DIRECTORY_NOT_FOUND,
                f"Journal directory does not exist: {self.journal_dir}",
                hint="Create the directory or set JOURNAL_DIR in your 2log.conf.",
            )
        if writable and not os.access(self.journal_dir, os.W_OK):
            raise TwoLogError(
                ErrorKind.DIRECTORY_NOT_FOUND,
                f"Journal directory is not writable: {self.journal_dir}",
            )

    def read(self, target_date: date) -> str | None:
        """Read note content for a date. Returns None if not found."""
        path = self.path_for(target_date)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, target_date: date, content: str) -> None:
        """Write/overwrite note content for a date."""
        path = self.path_for(target_date)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise TwoLogError(
                ErrorKind.FILE_WRITE_ERROR,
                f"Failed to write {path}: {e}",
            ) from e
        logger.debug(f"Wrote {len(content)} chars to {path}")

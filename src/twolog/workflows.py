"""Workflow layer between the CLI and the section editor.

Each function reads today's note whole, edits it in memory with the core,
and (for add/undo) writes the whole note back.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, time
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import Config
from .core import (
    Entry,
    current_time,
    daily_note_template,
    insert_entry,
    list_entries,
    locate_section,
    remove_last,
)
from .errors import ErrorKind, TwoLogError
from .ports import JournalStore

logger = logging.getLogger(__name__)


@dataclass
class AddResult:
    """Outcome of adding an entry."""

    entry: Entry
    path: Path
    created: bool = False
    entries: list[Entry] = field(default_factory=list)


@dataclass
class UndoResult:
    """Outcome of removing the last entry."""

    entry: Entry
    path: Path


def get_journal(config: Config) -> FileJournalStore:
    """Resolve journal store from config."""
    return FileJournalStore(Path(config.journal_dir).expanduser())


def _read_note(store: JournalStore, today: date) -> str | None:
    """Note content, or None when the file is absent or blank."""
    content = store.read(today)
    if content is None or not content.strip():
        return None
    return content


def add_entry(
    config: Config,
    message: str,
    entry_time: time | None = None,
    today: date | None = None,
    store: JournalStore | None = None,
) -> AddResult:
    """Add a timestamped entry under the configured header of today's note."""
    if not message.strip():
        raise TwoLogError(
            ErrorKind.INVALID_ARGUMENTS,
            "Log message cannot be empty",
            hint="Run '2log -h' for usage.",
        )

    today = today or date.today()
    store = store or get_journal(config)
    store.validate(writable=True)

    content = _read_note(store, today)
    created = content is None
    if created:
        logger.debug(f"No note for {today}, starting from template")
        content = daily_note_template(today, config.today_header)

    lines = content.split("\n")
    section = locate_section(lines, config.today_header)
    entry = Entry.create(entry_time or current_time(), message)
    entries = insert_entry(lines, section, entry)

    store.write(today, "\n".join(lines))
    logger.debug(f"Added {entry.raw!r}; section now has {len(entries)} entries")
    return AddResult(entry=entry, path=store.path_for(today), created=created, entries=entries)


def show_entries(
    config: Config,
    today: date | None = None,
    store: JournalStore | None = None,
) -> list[Entry]:
    """Entries under the configured header of today's note, in time order."""
    today = today or date.today()
    store = store or get_journal(config)
    store.validate(writable=False)

    content = _read_note(store, today)
    if content is None:
        return []

    lines = content.split("\n")
    return list_entries(lines, locate_section(lines, config.today_header))


def undo_last(
    config: Config,
    today: date | None = None,
    store: JournalStore | None = None,
) -> UndoResult:
    """Remove the chronologically last entry from today's note."""
    today = today or date.today()
    store = store or get_journal(config)
    store.validate(writable=True)

    content = _read_note(store, today)
    if content is None:
        raise TwoLogError(
            ErrorKind.NO_ENTRIES_TO_UNDO,
            f"No daily note for today ({store.path_for(today).name}), nothing to undo.",
        )

    lines = content.split("\n")
    section = locate_section(lines, config.today_header)
    removed = remove_last(lines, section)

    store.write(today, "\n".join(lines))
    logger.debug(f"Removed {removed.raw!r}")
    return UndoResult(entry=removed, path=store.path_for(today))

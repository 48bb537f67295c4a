"""Section editor - pure functions over the lines of a daily note.

A section is the region from a header line up to the next ``## `` header
(or the end of the note). Every function here works on a mutable list of
lines in place; reading and writing the note is the caller's job.
"""

from dataclasses import dataclass

from ..errors import ErrorKind, TwoLogError
from .entries import Entry, sort_entries

SECTION_BREAK = "## "


@dataclass(frozen=True)
class Section:
    """Half-open line range: ``start`` is the header, ``end`` the next header or EOF."""

    start: int
    end: int

    @property
    def body(self) -> range:
        return range(self.start + 1, self.end)


def locate_section(lines: list[str], header: str) -> Section:
    """Find the first line matching ``header`` (trimmed) and the extent of its section."""
    wanted = header.strip()
    if not wanted:
        raise TwoLogError(
            ErrorKind.HEADER_NOT_FOUND,
            "No section header configured.",
            hint='Set TODAY_HEADER in your 2log.conf, e.g. TODAY_HEADER = "## Today".',
        )
    start = next((i for i, line in enumerate(lines) if line.strip() == wanted), None)
    if start is None:
        raise TwoLogError(
            ErrorKind.HEADER_NOT_FOUND,
            f'Could not find "{wanted}" header in the daily note.',
            hint=f'Make sure your daily note contains a "{wanted}" header, or add it manually.',
        )

    end = len(lines)
    for i in range(start + 1, len(lines)):
        if lines[i].startswith(SECTION_BREAK):
            end = i
            break
    return Section(start=start, end=end)


def parse_entries(lines: list[str], section: Section) -> list[Entry]:
    """Parse entry lines in the section body, sorted by time of day.

    Lines that are not entries are skipped, so free text can live in the
    section alongside the log.
    """
    entries = []
    for i in section.body:
        entry = Entry.from_line(lines[i])
        if entry is not None:
            entries.append(entry)
    return sort_entries(entries)


def list_entries(lines: list[str], section: Section) -> list[Entry]:
    """Read-only view of the section's entries."""
    return parse_entries(lines, section)


def insert_entry(lines: list[str], section: Section, entry: Entry) -> list[Entry]:
    """Insert ``entry`` and regroup all entries, sorted, right after the header.

    Existing entry lines are removed from wherever they were in the body and
    the full sorted block is written directly below the header. Non-entry
    lines stay where the removals leave them, which moves any text that sat
    between entries below the block.

    Returns the section's entries after the insert.
    """
    entries = sort_entries(parse_entries(lines, section) + [entry])

    for i in reversed(section.body):
        if Entry.from_line(lines[i]) is not None:
            del lines[i]

    insert_at = section.start + 1
    lines[insert_at:insert_at] = [e.raw for e in entries]
    return entries


def remove_last(lines: list[str], section: Section) -> Entry:
    """Remove the chronologically last entry (the later one on ties) and return it."""
    entries = parse_entries(lines, section)
    if not entries:
        raise TwoLogError(
            ErrorKind.NO_ENTRIES_TO_UNDO,
            f'No entries to undo under "{lines[section.start].strip()}".',
        )

    last = entries[-1]
    for i in section.body:
        if lines[i] == last.raw:
            del lines[i]
            break
    return last

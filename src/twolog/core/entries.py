"""Timestamped entry values - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime, time

from ..errors import ErrorKind, TwoLogError

ENTRY_RE = re.compile(r"^- +(\d{1,2}):(\d{2}) +(\S.*)$")
TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def _make_time(hour: str, minute: str) -> time | None:
    h, m = int(hour), int(minute)
    if 0 <= h <= 23 and 0 <= m <= 59:
        return time(h, m)
    return None


def parse_time(value: str) -> time:
    """Parse an ``H:MM`` or ``HH:MM`` string into a time of day."""
    match = TIME_RE.match(value.strip())
    parsed = _make_time(match.group(1), match.group(2)) if match else None
    if parsed is None:
        raise TwoLogError(
            ErrorKind.INVALID_TIME_FORMAT,
            f'Invalid time "{value}". Use HH:mm (00:00-23:59), e.g. 09:30 or 9:30.',
        )
    return parsed


def format_time(t: time) -> str:
    return t.strftime("%H:%M")


def current_time() -> time:
    """Local wall-clock time truncated to the minute."""
    now = datetime.now()
    return time(now.hour, now.minute)


@dataclass(frozen=True)
class Entry:
    """One bullet line of the form ``- HH:MM message``.

    ``raw`` keeps the line exactly as it appeared in the note so unchanged
    entries are written back untouched.
    """

    at: time
    message: str
    raw: str

    @property
    def minutes(self) -> int:
        """Minutes since midnight, the ordering key."""
        return self.at.hour * 60 + self.at.minute

    def format_time(self) -> str:
        return format_time(self.at)

    def to_line(self) -> str:
        """Canonical line for this entry."""
        return f"- {self.format_time()} {self.message}"

    @classmethod
    def create(cls, entry_time: time, message: str) -> "Entry":
        """Build a new entry; its raw text is the canonical line."""
        entry_time = time(entry_time.hour, entry_time.minute)
        return cls(at=entry_time, message=message, raw=f"- {format_time(entry_time)} {message}")

    @classmethod
    def from_line(cls, line: str) -> "Entry | None":
        """Parse a bullet line. Returns None for anything that is not an entry."""
        match = ENTRY_RE.match(line)
        if not match:
            return None
        entry_time = _make_time(match.group(1), match.group(2))
        if entry_time is None:
            return None
        return cls(at=entry_time, message=match.group(3), raw=line)


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Sort chronologically. Stable, so equal times keep their relative order."""
    return sorted(entries, key=lambda e: e.minutes)

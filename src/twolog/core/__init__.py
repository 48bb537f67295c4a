"""Functional core - pure note editing logic with no I/O."""

from .entries import Entry, current_time, format_time, parse_time, sort_entries
from .section import (
    Section,
    insert_entry,
    list_entries,
    locate_section,
    parse_entries,
    remove_last,
)
from .template import daily_note_template

__all__ = [
    # Entries
    "Entry",
    "current_time",
    "format_time",
    "parse_time",
    "sort_entries",
    # Section editor
    "Section",
    "insert_entry",
    "list_entries",
    "locate_section",
    "parse_entries",
    "remove_last",
    # Template
    "daily_note_template",
]

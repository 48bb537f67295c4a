"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore

__all__ = [
    "FileJournalStore",
]

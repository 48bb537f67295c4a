"""Ports - interfaces/protocols for external dependencies."""

from .journal_store import JournalStore

__all__ = [
    "JournalStore",
]

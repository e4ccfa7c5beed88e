"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore, GroupedEntries, Subscriber

__all__ = [
    "EntryStore",
    "GroupedEntries",
    "Subscriber",
]

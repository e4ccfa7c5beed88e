"""Adapters - implementations of ports."""

from .memory_store import InMemoryEntryStore

__all__ = [
    "InMemoryEntryStore",
]

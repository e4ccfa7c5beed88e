"""In-memory entry store adapter."""

import logging
from collections.abc import Callable
from datetime import datetime
from types import MappingProxyType

from fitness_tracker.core.entries import TIMESTAMP_FORMAT, FitnessEntry, group_by_date
from fitness_tracker.ports.entry_store import GroupedEntries, Subscriber

logger = logging.getLogger(__name__)


class InMemoryEntryStore:
    """
    Process-local entry store.

    Implements EntryStore protocol. Entries live until the process exits.
    Each append replaces the entry tuple wholesale, so readers never see a
    partial write.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._entries: tuple[FitnessEntry, ...] = ()
        self._subscribers: list[Subscriber] = []

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[FitnessEntry, ...]:
        """All entries in the order they were added."""
        return self._entries

    def add_entry(self, type: str, value: int) -> FitnessEntry:
        """Append a new entry stamped with the current local time."""
        entry = FitnessEntry(
            id=len(self._entries) + 1,
            type=type,
            value=value,
            date=self._clock().strftime(TIMESTAMP_FORMAT),
        )
        self._entries = self._entries + (entry,)
        logger.debug(f"Added entry {entry.id}: {entry.type}={entry.value} at {entry.date}")
        self._publish()
        return entry

    def grouped_by_date(self) -> GroupedEntries:
        """Read-only snapshot of entries bucketed by date key."""
        grouped = group_by_date(list(self._entries))
        return MappingProxyType({key: tuple(bucket) for key, bucket in grouped.items()})

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for new snapshots. Returns an unsubscribe function."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.grouped_by_date()
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception(f"Subscriber {callback!r} failed")

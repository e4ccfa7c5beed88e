"""Entry store interface."""

from collections.abc import Callable, Mapping
from typing import Protocol

from fitness_tracker.core.entries import FitnessEntry

GroupedEntries = Mapping[str, tuple[FitnessEntry, ...]]
Subscriber = Callable[[GroupedEntries], None]


class EntryStore(Protocol):
    """Interface for recording entries and reading them grouped by day."""

    def add_entry(self, type: str, value: int) -> FitnessEntry:
        """Append a new entry stamped with the current local time."""
        ...

    def grouped_by_date(self) -> GroupedEntries:
        """Entries bucketed by date key, in first-occurrence order."""
        ...

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for new snapshots. Returns an unsubscribe function."""
        ...

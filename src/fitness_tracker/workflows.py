"""Shared workflow layer between CLI and Telegram.

Both surfaces render the same screens and funnel raw quantity text through
submit_quantity before it reaches the store.
"""

import logging
from datetime import date

from .core.entries import FitnessEntry
from .core.exercises import parse_quantity
from .core.history import GOALS_TEXT, HOME_TITLE, format_history, format_today
from .ports.entry_store import EntryStore, GroupedEntries

logger = logging.getLogger(__name__)


class HistoryView:
    """
    History screen kept current by subscribing to a store.

    Re-renders on every published snapshot; `text` is always the latest.
    """

    def __init__(self, store: EntryStore):
        self.text = format_history(store.grouped_by_date())
        self._unsubscribe = store.subscribe(self.update)

    def update(self, snapshot: GroupedEntries) -> None:
        self.text = format_history(snapshot)

    def close(self) -> None:
        """Stop receiving snapshots."""
        self._unsubscribe()


def submit_quantity(store: EntryStore, label: str, raw: str) -> FitnessEntry | None:
    """
    Record raw quantity text for a tile.

    Text that does not parse as a quantity is dropped without feedback and
    returns None; the store is left untouched.
    """
    value = parse_quantity(raw)
    if value is None:
        logger.debug(f"Ignoring non-numeric input for {label}: {raw!r}")
        return None
    return store.add_entry(label, value)


def render_home(today: date | None = None) -> str:
    """Home screen header: title and today's date."""
    return f"*{HOME_TITLE}*\n{format_today(today)}"


def render_goals() -> str:
    """Goals screen placeholder."""
    return GOALS_TEXT

"""Pure history and screen formatting - no I/O dependencies."""

from collections.abc import Mapping, Sequence
from datetime import date, datetime

from .entries import FitnessEntry, format_entry_line

DATE_KEY_FORMAT = "%Y-%m-%d"

HOME_TITLE = "Fitness Tracker for Home"
HISTORY_TITLE = "Exercise History"
GOALS_TEXT = "Goals Screen"


def format_long_date(d: date) -> str:
    """Format a date as "June 5, 2024"."""
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def format_display_date(date_key: str) -> str:
    """
    Convert a "yyyy-MM-dd" date key into a section header.

    Raises ValueError if date_key is not a valid calendar date.
    """
    parsed = datetime.strptime(date_key, DATE_KEY_FORMAT).date()
    return format_long_date(parsed)


def format_today(today: date | None = None) -> str:
    """Home screen date line."""
    return format_long_date(today or date.today())


def format_history(grouped: Mapping[str, Sequence[FitnessEntry]]) -> str:
    """
    Render grouped entries as markdown.

    Pure function - no I/O.
    """
    lines = [f"## {HISTORY_TITLE}"]
    if not grouped:
        lines.append("")
        lines.append("No entries yet.")
        return "\n".join(lines)

    for date_key, entries in grouped.items():
        lines.append("")
        lines.append(f"### {format_display_date(date_key)}")
        for entry in entries:
            lines.append(f"- {format_entry_line(entry)}")

    return "\n".join(lines)

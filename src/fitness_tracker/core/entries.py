"""Pure entry domain logic - no I/O dependencies."""

from dataclasses import dataclass

CALORIE_INTAKE = "Calorie Intake"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class FitnessEntry:
    """One logged activity."""

    id: int
    type: str
    value: int
    date: str  # "yyyy-MM-dd HH:mm:ss"

    @property
    def date_key(self) -> str:
        """Calendar day portion of the timestamp (before the first space)."""
        return self.date.split(" ")[0]

    @property
    def is_calorie_intake(self) -> bool:
        return self.type == CALORIE_INTAKE

    @property
    def unit(self) -> str:
        return "calories" if self.is_calorie_intake else "reps"


def group_by_date(entries: list[FitnessEntry]) -> dict[str, list[FitnessEntry]]:
    """
    Bucket entries by date key.

    Keys keep first-occurrence order, entries keep insertion order.
    Pure function - no I/O.
    """
    grouped: dict[str, list[FitnessEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.date_key, []).append(entry)
    return grouped


def format_entry_line(entry: FitnessEntry) -> str:
    """Format a single entry for display in history."""
    return f"{entry.type}: {entry.value} {entry.unit}"

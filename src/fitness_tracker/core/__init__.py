"""Functional core - pure business logic with no I/O."""

from .entries import CALORIE_INTAKE, FitnessEntry, format_entry_line, group_by_date
from .exercises import DEFAULT_EXERCISES, input_label, parse_quantity, prompt_title
from .history import format_display_date, format_history, format_today

__all__ = [
    # Entries
    "CALORIE_INTAKE",
    "FitnessEntry",
    "format_entry_line",
    "group_by_date",
    # Exercises
    "DEFAULT_EXERCISES",
    "input_label",
    "parse_quantity",
    "prompt_title",
    # History
    "format_display_date",
    "format_history",
    "format_today",
]

"""Exercise catalogue and quantity input parsing."""

import re

from .entries import CALORIE_INTAKE

DEFAULT_EXERCISES = [
    "Push-ups",
    "Squats",
    "Pull-ups",
    "Curls",
    "Lunges",
    "Plank",
    "Sit Ups",
    "Crunches",
    "Burpees",
    "Chin Ups",
]

INT_MAX = 2**31 - 1

# Telegram caps callback data at 64 bytes; tiles carry "log:" plus the label
MAX_LABEL_BYTES = 60

_QUANTITY_RE = re.compile(r"[+-]?[0-9]+")


def prompt_title(label: str) -> str:
    """Title of the input prompt for a tile."""
    if label == CALORIE_INTAKE:
        return "Enter calorie intake"
    return f"Enter {label} count"


def input_label(label: str) -> str:
    """Label of the quantity field for a tile."""
    if label == CALORIE_INTAKE:
        return "Calories"
    return f"Number of {label}"


def parse_quantity(raw: str) -> int | None:
    """
    Parse raw quantity text.

    Returns None unless raw is a signed run of ASCII digits within the
    32-bit int range and not negative.
    """
    if not _QUANTITY_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < 0 or value > INT_MAX:
        return None
    return value


def chunk_grid(labels: list[str], columns: int = 2) -> list[list[str]]:
    """Lay labels out in rows of `columns`, last row may be short."""
    return [labels[i : i + columns] for i in range(0, len(labels), columns)]

"""Tests for history and screen formatting."""

from datetime import date

import pytest

from fitness_tracker.core.entries import FitnessEntry
from fitness_tracker.core.history import (
    format_display_date,
    format_history,
    format_today,
)


class TestFormatDisplayDate:
    def test_long_form(self):
        assert format_display_date("2024-06-05") == "June 5, 2024"

    def test_two_digit_day(self):
        assert format_display_date("2025-12-31") == "December 31, 2025"

    @pytest.mark.parametrize("bad", ["", "June 5", "2024-13-01", "2024-02-30", "2024-06-05 08:00:00"])
    def test_malformed_raises(self, bad):
        with pytest.raises(ValueError):
            format_display_date(bad)


class TestFormatToday:
    def test_uses_given_date(self):
        assert format_today(date(2025, 1, 15)) == "January 15, 2025"


class TestFormatHistory:
    def test_empty(self):
        text = format_history({})
        assert "Exercise History" in text
        assert "No entries yet." in text

    def test_sections_and_lines(self):
        grouped = {
            "2024-06-05": (
                FitnessEntry(id=1, type="Push-ups", value=10, date="2024-06-05 08:00:00"),
                FitnessEntry(id=2, type="Calorie Intake", value=500, date="2024-06-05 12:00:00"),
            ),
            "2024-06-06": (
                FitnessEntry(id=3, type="Squats", value=20, date="2024-06-06 07:00:00"),
            ),
        }

        text = format_history(grouped)
        lines = text.splitlines()

        assert "### June 5, 2024" in lines
        assert "### June 6, 2024" in lines
        assert lines.index("### June 5, 2024") < lines.index("- Push-ups: 10 reps")
        assert lines.index("- Push-ups: 10 reps") < lines.index("- Calorie Intake: 500 calories")
        assert lines.index("- Calorie Intake: 500 calories") < lines.index("### June 6, 2024")
        assert "No entries yet." not in text

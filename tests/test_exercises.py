"""Tests for the exercise catalogue and quantity parsing."""

import pytest

from fitness_tracker.core.exercises import (
    DEFAULT_EXERCISES,
    INT_MAX,
    chunk_grid,
    input_label,
    parse_quantity,
    prompt_title,
)


class TestCatalogue:
    def test_ten_default_tiles(self):
        assert len(DEFAULT_EXERCISES) == 10
        assert DEFAULT_EXERCISES[0] == "Push-ups"
        assert DEFAULT_EXERCISES[-1] == "Chin Ups"

    def test_prompt_title(self):
        assert prompt_title("Squats") == "Enter Squats count"
        assert prompt_title("Calorie Intake") == "Enter calorie intake"

    def test_input_label(self):
        assert input_label("Squats") == "Number of Squats"
        assert input_label("Calorie Intake") == "Calories"

    def test_chunk_grid_two_columns(self):
        rows = chunk_grid(["a", "b", "c"], columns=2)
        assert rows == [["a", "b"], ["c"]]


class TestParseQuantity:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("10", 10),
            ("0", 0),
            ("+7", 7),
            ("007", 7),
            (str(INT_MAX), INT_MAX),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_quantity(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "12abc", "1.5", " 10", "10 ", "-5", str(INT_MAX + 1), "١٢"],
    )
    def test_invalid(self, raw):
        assert parse_quantity(raw) is None

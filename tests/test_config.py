"""Tests for configuration loading."""

import pytest

from fitness_tracker.config import Config, load_config
from fitness_tracker.core.exercises import DEFAULT_EXERCISES, MAX_LABEL_BYTES


@pytest.fixture
def conf_file(tmp_path):
    return tmp_path / "fitness.conf"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.exercises == DEFAULT_EXERCISES

    def test_defaults_are_not_shared(self):
        config = Config()
        config.exercises.append("Rows")
        assert Config().exercises == DEFAULT_EXERCISES

    def test_parses_keys(self, conf_file):
        conf_file.write_text(
            "# Fitness config\n"
            "\n"
            'TELEGRAM_BOT_TOKEN="123:abc" # from BotFather\n'
            "TELEGRAM_ALLOWED_USERS=111, 222\n"
            "EXERCISES=Push-ups, Rows ,Dips\n"
        )

        config = load_config(conf_file)

        assert config.telegram_bot_token == "123:abc"
        assert config.telegram_allowed_users == [111, 222]
        assert config.exercises == ["Push-ups", "Rows", "Dips"]

    def test_unquoted_inline_comment(self, conf_file):
        conf_file.write_text("TELEGRAM_BOT_TOKEN=xyz # comment\n")
        assert load_config(conf_file).telegram_bot_token == "xyz"

    def test_single_quotes(self, conf_file):
        conf_file.write_text("telegram_bot_token='tok'\n")
        assert load_config(conf_file).telegram_bot_token == "tok"

    def test_invalid_user_ids_skipped(self, conf_file, caplog):
        conf_file.write_text("TELEGRAM_ALLOWED_USERS=111,bob,333\n")

        config = load_config(conf_file)

        assert config.telegram_allowed_users == [111, 333]
        assert "bob" in caplog.text

    def test_empty_exercises_keeps_defaults(self, conf_file):
        conf_file.write_text("EXERCISES=\n")
        assert load_config(conf_file).exercises == DEFAULT_EXERCISES

    def test_ignores_lines_without_equals(self, conf_file):
        conf_file.write_text("just some text\nTELEGRAM_BOT_TOKEN=t\n")
        assert load_config(conf_file).telegram_bot_token == "t"

    def test_overlong_exercise_label_skipped(self, conf_file, caplog):
        long_label = "x" * (MAX_LABEL_BYTES + 1)
        conf_file.write_text(f"EXERCISES=Push-ups,{long_label},Dips\n")

        config = load_config(conf_file)

        assert config.exercises == ["Push-ups", "Dips"]
        assert "longer than" in caplog.text

    def test_label_length_counts_bytes(self, conf_file):
        # "é" is two bytes in UTF-8
        at_limit = "é" * (MAX_LABEL_BYTES // 2)
        over_limit = "é" * (MAX_LABEL_BYTES // 2 + 1)
        conf_file.write_text(f"EXERCISES={at_limit},{over_limit}\n", encoding="utf-8")

        assert load_config(conf_file).exercises == [at_limit]

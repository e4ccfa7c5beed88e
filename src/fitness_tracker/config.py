"""Configuration management for Fitness Tracker."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.exercises import DEFAULT_EXERCISES, MAX_LABEL_BYTES

logger = logging.getLogger(__name__)

FITNESS_HOME = Path(os.environ.get("FITNESS_HOME", Path.home() / "fitness"))
CONFIG_FILE = FITNESS_HOME / "config" / "fitness.conf"


@dataclass
class Config:
    """Fitness Tracker configuration."""

    exercises: list[str] = field(default_factory=lambda: list(DEFAULT_EXERCISES))
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        try:
            users.append(int(raw))
        except ValueError:
            logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {raw!r}")
    return users


def _parse_exercises(value: str) -> list[str]:
    exercises = []
    for label in value.split(","):
        label = label.strip()
        if not label:
            continue
        if len(label.encode("utf-8")) > MAX_LABEL_BYTES:
            logger.warning(f"Ignoring exercise label longer than {MAX_LABEL_BYTES} bytes: {label!r}")
            continue
        exercises.append(label)
    return exercises


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from fitness.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "exercises":
                exercises = _parse_exercises(value)
                if exercises:
                    config.exercises = exercises
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config

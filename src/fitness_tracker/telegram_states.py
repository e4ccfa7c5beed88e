"""Conversation states for Telegram bot."""

from enum import IntEnum, auto


class LogStates(IntEnum):
    """States for the log-entry conversation."""

    ENTER_VALUE = auto()

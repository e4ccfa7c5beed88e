"""Telegram command handlers."""

import logging

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes, ConversationHandler

from .core.entries import CALORIE_INTAKE, format_entry_line
from .core.exercises import DEFAULT_EXERCISES, chunk_grid, input_label, prompt_title
from .ports.entry_store import EntryStore
from .telegram_format import send_markdown
from .telegram_states import LogStates
from .workflows import HistoryView, render_goals, render_home, submit_quantity

logger = logging.getLogger(__name__)

STORE_KEY = "store"
EXERCISES_KEY = "exercises"
HISTORY_KEY = "history_view"
ALLOWED_USERS_KEY = "allowed_users"
LABEL_KEY = "log_label"
LOG_PREFIX = "log:"


def _store(context: ContextTypes.DEFAULT_TYPE) -> EntryStore:
    return context.bot_data[STORE_KEY]


def home_keyboard(exercises: list[str]) -> InlineKeyboardMarkup:
    """Exercise tiles two per row, Calorie Intake on its own row."""
    keyboard = [
        [InlineKeyboardButton(label, callback_data=f"{LOG_PREFIX}{label}") for label in row]
        for row in chunk_grid(exercises, columns=2)
    ]
    keyboard.append(
        [InlineKeyboardButton(f"{CALORIE_INTAKE} +", callback_data=f"{LOG_PREFIX}{CALORIE_INTAKE}")]
    )
    return InlineKeyboardMarkup(keyboard)


# ============== Screens ==============


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start and /home - show the exercise grid."""
    exercises = context.bot_data.get(EXERCISES_KEY, DEFAULT_EXERCISES)
    await send_markdown(
        update.message,
        render_home(),
        reply_markup=home_keyboard(exercises),
    )


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.message.reply_text(
        "*Fitness Tracker Commands*\n\n"
        "/home - Pick an exercise to log\n"
        "/calories - Log calorie intake\n"
        "/history - Entries grouped by day\n"
        "/goals - Your goals\n"
        "/cancel - Cancel current entry\n",
        parse_mode="Markdown",
    )


async def history_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /history command - entries grouped by day."""
    view: HistoryView = context.bot_data[HISTORY_KEY]
    await send_markdown(update.message, view.text)


async def goals_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /goals command."""
    await update.message.reply_text(render_goals())


# ============== Log Conversation ==============


async def _prompt_for_value(update: Update, context: ContextTypes.DEFAULT_TYPE, label: str):
    context.user_data[LABEL_KEY] = label
    message = f"{prompt_title(label)}\n{input_label(label)}:"
    if update.callback_query:
        await update.callback_query.message.reply_text(message)
    else:
        await update.message.reply_text(message)
    return LogStates.ENTER_VALUE


async def log_tile_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the log conversation from a tapped tile."""
    query = update.callback_query
    await query.answer()

    # CallbackQueryHandler takes no filters, so the allowlist is checked here
    allowed_users = context.bot_data.get(ALLOWED_USERS_KEY) or []
    user = update.effective_user
    if allowed_users and (user is None or user.id not in allowed_users):
        logger.warning(f"Unauthorized tile tap from user {user.id if user else None}")
        return ConversationHandler.END

    label = query.data[len(LOG_PREFIX):]
    return await _prompt_for_value(update, context, label)


async def calories_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Start the log conversation for calorie intake."""
    return await _prompt_for_value(update, context, CALORIE_INTAKE)


async def log_value_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle the quantity reply. Non-numeric text keeps the prompt open."""
    label = context.user_data.get(LABEL_KEY)
    if label is None:
        return ConversationHandler.END

    # Surrounding whitespace is trimmed before parsing; the parser itself is strict
    entry = submit_quantity(_store(context), label, update.message.text.strip())
    if entry is None:
        return LogStates.ENTER_VALUE

    context.user_data.pop(LABEL_KEY, None)
    await update.message.reply_text(f"Logged {format_entry_line(entry)}")
    return ConversationHandler.END


async def log_cancel_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Cancel the log conversation."""
    context.user_data.pop(LABEL_KEY, None)
    await update.message.reply_text("Cancelled.")
    return ConversationHandler.END

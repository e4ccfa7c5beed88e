"""Fitness Tracker Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    ConversationHandler,
    MessageHandler,
    filters,
)

from .adapters.memory_store import InMemoryEntryStore
from .config import Config, load_config
from .ports.entry_store import EntryStore, GroupedEntries
from .telegram_handlers import (
    ALLOWED_USERS_KEY,
    EXERCISES_KEY,
    HISTORY_KEY,
    LOG_PREFIX,
    STORE_KEY,
    start_handler,
    help_handler,
    history_handler,
    goals_handler,
    log_tile_handler,
    calories_handler,
    log_value_handler,
    log_cancel_handler,
)
from .telegram_states import LogStates
from .workflows import HistoryView

logger = logging.getLogger(__name__)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config: Config | None = None, store: EntryStore | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to fitness.conf"
        )

    if store is None:
        store = InMemoryEntryStore()

    # Build application
    app = Application.builder().token(config.telegram_bot_token).build()
    app.bot_data[STORE_KEY] = store
    app.bot_data[EXERCISES_KEY] = config.exercises
    app.bot_data[HISTORY_KEY] = HistoryView(store)
    app.bot_data[ALLOWED_USERS_KEY] = config.telegram_allowed_users

    # Create auth filter
    auth_filter = AuthFilter(config.telegram_allowed_users)

    # Simple commands (with auth filter)
    app.add_handler(CommandHandler(["start", "home"], start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(CommandHandler("history", history_handler, filters=auth_filter))
    app.add_handler(CommandHandler("goals", goals_handler, filters=auth_filter))

    # Log conversation: tile tap or /calories, then the quantity.
    # Re-entry lets a new tap replace the label of an open prompt.
    log_conv = ConversationHandler(
        entry_points=[
            CallbackQueryHandler(log_tile_handler, pattern=f"^{LOG_PREFIX}"),
            CommandHandler("calories", calories_handler, filters=auth_filter),
        ],
        states={
            LogStates.ENTER_VALUE: [
                MessageHandler(filters.TEXT & ~filters.COMMAND & auth_filter, log_value_handler),
            ],
        },
        fallbacks=[CommandHandler("cancel", log_cancel_handler)],
        per_user=True,
        allow_reentry=True,
    )
    app.add_handler(log_conv)

    # Handle unauthorized access attempts
    async def unauthorized_handler(update: Update, context):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.effective_message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in fitness.conf"
        )

    # Add catch-all for unauthorized users if we have an allowlist
    if config.telegram_allowed_users:
        app.add_handler(
            MessageHandler(~auth_filter & filters.ALL, unauthorized_handler)
        )

    return app


def log_snapshot(snapshot: GroupedEntries) -> None:
    """Store subscriber: summarize each new snapshot in the log."""
    total = sum(len(bucket) for bucket in snapshot.values())
    logger.info(f"History updated: {total} entries across {len(snapshot)} day(s)")


def run_bot():
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    store = InMemoryEntryStore()
    store.subscribe(log_snapshot)
    app = create_application(config, store)

    # Log startup info
    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting Fitness Tracker Telegram bot...")

    # Run bot
    app.run_polling(allowed_updates=Update.ALL_TYPES)

"""Fitness Tracker CLI."""

import json
import logging
import sys

import click

from .adapters.memory_store import InMemoryEntryStore
from .config import load_config
from .core.entries import CALORIE_INTAKE, format_entry_line
from .core.exercises import chunk_grid, input_label, prompt_title
from .core.history import HOME_TITLE, format_today
from .ports.entry_store import EntryStore
from .workflows import HistoryView, render_goals, submit_quantity


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@click.group()
@click.version_option(package_name="fitness-tracker")
def main():
    """Fitness Tracker - log reps and calories."""
    pass


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def exercises(as_json: bool):
    """List the exercise tiles."""
    config = load_config()
    labels = config.exercises + [CALORIE_INTAKE]

    if as_json:
        click.echo(json.dumps(labels, indent=2))
        return

    for label in labels:
        click.echo(label)


def _echo_home(labels: list[str]) -> None:
    click.echo(f"\n{HOME_TITLE}")
    click.echo(format_today())
    click.echo("")
    numbered = [f"{i}. {label}" for i, label in enumerate(labels, start=1)]
    for row in chunk_grid(numbered, columns=2):
        click.echo("  " + "".join(f"{cell:<20}" for cell in row).rstrip())
    click.echo(f"  c. {CALORIE_INTAKE}")
    click.echo("  h. History   g. Goals   q. Quit")


def _log_entry(store: EntryStore, label: str) -> None:
    """Prompt for a quantity until it parses or the prompt is left empty."""
    click.echo(f"\n{prompt_title(label)}")
    while True:
        # Surrounding whitespace is trimmed before parsing; the parser itself is strict
        raw = click.prompt(input_label(label), default="", show_default=False).strip()
        if not raw:
            click.echo("Cancelled.")
            return
        entry = submit_quantity(store, label, raw)
        if entry is not None:
            click.echo(f"✓ Logged {format_entry_line(entry)}")
            return


def _resolve_choice(choice: str, labels: list[str]) -> str | None:
    if choice == "c":
        return CALORIE_INTAKE
    if choice.isdigit() and 1 <= int(choice) <= len(labels):
        return labels[int(choice) - 1]
    return None


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def session(debug: bool):
    """Run an interactive logging session (entries are kept in memory)."""
    _configure_logging(debug)
    config = load_config()
    labels = config.exercises

    store = InMemoryEntryStore()
    history = HistoryView(store)

    try:
        while True:
            _echo_home(labels)
            choice = click.prompt(">", default="", show_default=False).strip().lower()

            if choice == "q":
                break
            if choice == "h":
                click.echo("")
                click.echo(history.text)
                continue
            if choice == "g":
                click.echo(f"\n{render_goals()}")
                continue

            label = _resolve_choice(choice, labels)
            if label is None:
                if choice:
                    click.echo(f"Unknown choice: {choice}")
                continue
            _log_entry(store, label)
    finally:
        history.close()

    click.echo(f"Session ended with {len(store)} entries (not saved).")


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def bot(debug: bool):
    """Run the Telegram bot."""
    _configure_logging(debug)

    try:
        from .telegram_bot import run_bot
        click.echo("Starting Fitness Tracker Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot()
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot telegramify-markdown'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()

"""Main CLI application using Typer."""
import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ChatSettings
from ..conversation import ChatSession, ManualScheduler, Message, mock_conversation

# Create Typer app
app = typer.Typer(
    name="chatreaction",
    help="Mock chat with timed bot replies and emoji reactions",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _load_settings(**overrides) -> ChatSettings:
    """Read settings from the environment, exiting on invalid values."""
    try:
        return ChatSettings.from_env(**overrides)
    except ValidationError as e:
        console.print(f"[red]Error: invalid configuration[/red]\n{e}")
        raise typer.Exit(code=1)


def _virtual_clock(scheduler: ManualScheduler, start: datetime) -> Callable[[], datetime]:
    """Clock that follows the scheduler's simulated time from ``start``."""
    return lambda: start + timedelta(seconds=scheduler.now)


def _transcript_table(messages: list[Message] | tuple[Message, ...], title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Time", style="dim")
    table.add_column("From", style="bold")
    table.add_column("Message")
    table.add_column("Reactions")

    for index, message in enumerate(messages):
        sender = "[blue]You[/blue]" if message.is_from_user else "[magenta]Bot[/magenta]"
        table.add_row(
            str(index),
            message.timestamp.strftime("%H:%M:%S"),
            sender,
            escape(message.content),
            " ".join(message.reactions),
        )
    return table


@app.command()
def tui(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the random bot messages"
    ),
):
    """Launch the interactive chat TUI."""
    from ..ui import run_chat_tui

    settings = _load_settings(log_level=log_level, random_seed=seed)
    try:
        asyncio.run(run_chat_tui(settings))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def transcript(
    no_reactions: bool = typer.Option(
        False,
        "--no-reactions",
        help="Show the seed conversation without its sample reactions"
    ),
):
    """Print the seed conversation."""
    messages = mock_conversation(with_reactions=not no_reactions)
    console.print(_transcript_table(messages, "Seed conversation"))


@app.command()
def simulate(
    seconds: float = typer.Option(
        15.0,
        "--seconds",
        "-t",
        min=0.0,
        help="Seconds of simulated time to run"
    ),
    messages: list[str] = typer.Option(
        [],
        "--message",
        "-m",
        help="User message sent at the start (repeatable)"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for the random bot messages"
    ),
    no_history: bool = typer.Option(
        False,
        "--no-history",
        help="Start from an empty conversation instead of the seed"
    ),
):
    """Run the chat headless on a virtual clock and print the result."""
    settings = _load_settings(random_seed=seed)
    scheduler = ManualScheduler()
    session = ChatSession(
        scheduler,
        settings,
        clock=_virtual_clock(scheduler, datetime.now()),
        seed_conversation=not no_history,
    )

    session.activate()
    for text in messages:
        session.send_message(text)
    scheduler.advance(seconds)
    session.deactivate()

    console.print(_transcript_table(session.store.messages, f"After {seconds:g}s"))
    console.print(f"[dim]{len(session.store)} messages[/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

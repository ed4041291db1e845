"""CLI subcommand for Rock Paper Chain."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rockpaper.config import load_settings
from rockpaper.distance import case_insensitive_distance
from rockpaper.game import RockPaperGame
from shared.utils.logging import setup_logging

app = typer.Typer(help="Play Rock Paper Chain, the edit-distance word chain game")
console = Console()


def _display_summary(result: dict, separator: str) -> None:
    """Print the box score for a finished game."""
    table = Table(title=f"Game {result['game_id']}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Difficulty", str(result["difficulty"]) if result["difficulty"] is not None else "-")
    table.add_row("Threshold", str(result["threshold"]) if result["threshold"] is not None else "-")
    table.add_row("Score", str(result["score"]))
    table.add_row("Chain", separator.join(result["chain"]))
    table.add_row("Ended by", result["end_reason"])
    table.add_row("Duration", f"{result['duration']:.1f}s")

    console.print(table)


@app.command()
def play(
    difficulty: Optional[int] = typer.Option(
        None, "--difficulty", "-d", help="Difficulty level; skips the difficulty prompt"
    ),
    settings_file: Optional[str] = typer.Option(
        None, "--settings", help="Path to settings YAML file"
    ),
    log_path: str = typer.Option("logs/rockpaper", help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play a game: each word must be within the difficulty's edit distance of the last."""
    log_dir = Path(log_path)
    setup_logging(log_dir, verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(settings_file)
    except ValueError as e:
        console.print(f"[red]Error loading settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if difficulty is not None and not (
        settings.min_difficulty <= difficulty <= settings.max_difficulty
    ):
        console.print(
            f"[red]Error: --difficulty must be between {settings.min_difficulty} "
            f"and {settings.max_difficulty}[/red]"
        )
        raise typer.Exit(1)

    game = RockPaperGame(settings=settings, console=console)
    result = game.play(difficulty=difficulty)
    logger.debug(f"Game result: {result}")

    console.print()
    _display_summary(result, settings.chain_separator)


@app.command()
def distance(
    word_a: str = typer.Argument(..., help="First word"),
    word_b: str = typer.Argument(..., help="Second word"),
):
    """Show the case-insensitive edit distance between two words."""
    dist = case_insensitive_distance(word_a, word_b)
    console.print(f"distance({word_a!r}, {word_b!r}) = [bold]{dist}[/bold]")


@app.command()
def thresholds(
    settings_file: Optional[str] = typer.Option(
        None, "--settings", help="Path to settings YAML file"
    ),
):
    """List the allowed edit distance for every difficulty level."""
    try:
        settings = load_settings(settings_file)
    except ValueError as e:
        console.print(f"[red]Error loading settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Difficulty thresholds")
    table.add_column("Difficulty", justify="right")
    table.add_column("Max edit distance", justify="right")
    for level in range(settings.min_difficulty, settings.max_difficulty + 1):
        table.add_row(str(level), str(settings.threshold_for(level)))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from rockpaper import __version__

    console.print(f"[bold]Rock Paper Chain[/bold] {__version__}")

"""Command-line interface for the word games collection.

This is the unified CLI entry point:
- `games rockpaper` - Play Rock Paper Chain (edit-distance word chain)
"""

import typer
from rich.console import Console

from rockpaper.cli_rockpaper import app as rockpaper_app

# Main application
app = typer.Typer(
    help="Word games played at the terminal",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(rockpaper_app, name="rockpaper", help="Play Rock Paper Chain (edit-distance word chain)")


@app.callback()
def main():
    """Word games played at the terminal.

    Examples:

        # Play, choosing the difficulty at the prompt
        games rockpaper play

        # Play at difficulty 7
        games rockpaper play --difficulty 7

        # Check how far apart two words are
        games rockpaper distance rock rocket
    """
    pass


@app.command()
def version():
    """Show version information."""
    from rockpaper import __version__ as rockpaper_version
    from shared import __version__ as shared_version

    console.print("[bold]Word games[/bold]")
    console.print(f"  rockpaper: {rockpaper_version}")
    console.print(f"  shared: {shared_version}")


if __name__ == "__main__":
    app()

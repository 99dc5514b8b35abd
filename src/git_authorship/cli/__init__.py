"""CLI entry point."""

import typer

app = typer.Typer(
    name="git-authorship",
    help="Count lines of code per author in a git repository.",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .tally import main as _main  # noqa: F401, E402

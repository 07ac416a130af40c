"""CLI entry point."""

import typer

app = typer.Typer(
    name="halstead-insight",
    help="Halstead Insight - Static Software Metrics for JavaScript Projects",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main  # noqa: F401, E402

"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..analysis import MetricsEngine
from ..config import load_config
from ..exceptions import HalsteadInsightError, InvalidPathError
from ..file_ops import safe_write_file
from ..formatters import CsvFormatter, RichFormatter, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Project folder to analyze (prompted for when omitted)",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default), csv, json",
    ),
    csv_output: Optional[Path] = typer.Option(
        None,
        "--csv",
        help="Also write the Metric,Value report to this CSV file",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Compute software metrics for every JavaScript/TypeScript, JSON, CSS and
    HTML file under a project folder (node_modules excluded).

    [bold cyan]Examples:[/bold cyan]

      halstead-insight /path/to/project

      halstead-insight . --format csv > metrics.csv

      halstead-insight . --csv metrics_report.csv

      halstead-insight . --format json | jq .sections
    """
    if version:
        console.print(
            f"[bold cyan]Halstead Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    valid_formats = {"rich", "csv", "json"}
    if fmt not in valid_formats:
        console.print(f"[red]Error:[/red] --format must be one of: {', '.join(sorted(valid_formats))}")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    if path is None:
        path = Path(typer.prompt("Enter project folder path"))

    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet)
        logger.debug(f"Loaded config: {settings}")

        root = path.expanduser()
        if not root.is_dir():
            raise InvalidPathError(root, "not an existing directory")

        report = MetricsEngine(settings).run(root)

        formatter = get_formatter(fmt, decimal_places=settings.decimal_places)
        formatter.render(report)

        if csv_output is not None:
            content = CsvFormatter(decimal_places=settings.decimal_places).format(report)
            safe_write_file(csv_output, content)
            if isinstance(formatter, RichFormatter):
                console.print(f"[green]CSV report written to[/green] {csv_output}")

    except HalsteadInsightError as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

"""Rich terminal formatter for Halstead Insight."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..metrics import AggregateReport
from .base import BaseFormatter, format_value

console = Console()


def _mi_label(mi: float) -> str:
    if mi >= 85:
        return "[green]highly maintainable[/green]"
    elif mi >= 65:
        return "[yellow]moderately maintainable[/yellow]"
    else:
        return "[red]hard to maintain[/red]"


class RichFormatter(BaseFormatter):
    """One panel per report section."""

    def __init__(self, decimal_places: int = 2, console: Console = console):
        super().__init__(decimal_places)
        self.console = console

    def render(self, report: AggregateReport) -> None:
        for title, values in report.sections().items():
            table = Table(show_header=False, box=None, padding=(0, 2))
            table.add_column("Metric", style="cyan")
            table.add_column("Value", justify="right")
            for metric, value in values.items():
                text = format_value(value, self.decimal_places)
                if metric.startswith("Interoperability"):
                    text += "%"
                table.add_row(metric, text)
            if title == "MAINTAINABILITY INDEX":
                table.add_row("", _mi_label(report.maintainability_index))
            self.console.print(
                Panel(table, title=f"[bold cyan]{title}[/bold cyan]", expand=False)
            )

        if report.skipped:
            self.console.print(
                f"[yellow]{len(report.skipped)} unparsable file(s) counted for size only:[/yellow]"
            )
            for path in report.skipped:
                self.console.print(f"  [dim]{path}[/dim]")

    def format(self, report: AggregateReport) -> str:
        with self.console.capture() as capture:
            self.render(report)
        return capture.get()

"""Base formatter interface for Halstead Insight output rendering."""

from abc import ABC, abstractmethod

from ..metrics import AggregateReport


def format_value(value, decimal_places: int) -> str:
    """Integers verbatim, floats with a fixed number of decimals."""
    if isinstance(value, int):
        return str(value)
    return f"{value:.{decimal_places}f}"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, decimal_places: int = 2):
        self.decimal_places = decimal_places

    @abstractmethod
    def render(self, report: AggregateReport) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, report: AggregateReport) -> str:
        """Return formatted string representation of the report."""

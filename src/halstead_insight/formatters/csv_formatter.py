"""CSV formatter for Halstead Insight."""

import csv
import io

from ..metrics import AggregateReport
from .base import BaseFormatter, format_value


class CsvFormatter(BaseFormatter):
    """Render the aggregate as a two-column Metric,Value table."""

    def render(self, report: AggregateReport) -> None:
        print(self.format(report), end="")

    def format(self, report: AggregateReport) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(["Metric", "Value"])
        for metric, value in report.as_dict().items():
            writer.writerow([metric, format_value(value, self.decimal_places)])
        return output.getvalue()

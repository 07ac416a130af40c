"""JSON formatter for Halstead Insight."""

import json

from ..metrics import AggregateReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the aggregate as JSON, grouped by report section."""

    def render(self, report: AggregateReport) -> None:
        print(self.format(report))

    def format(self, report: AggregateReport) -> str:
        data = {
            "sections": {
                title: {k: self._round(v) for k, v in values.items()}
                for title, values in report.sections().items()
            },
            "skipped_files": [str(p) for p in report.skipped],
        }
        return json.dumps(data, indent=2)

    def _round(self, value):
        if isinstance(value, int):
            return value
        return round(value, self.decimal_places)

"""Folding per-file metrics into run-wide totals and derived indices."""

from __future__ import annotations

import math
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

from ..config import DEFAULT_INTEROPERABILITY_SCORE
from ..math.statistics import Dispersion, Statistics
from .models import FileMetrics

MetricValue = Union[int, float]


def maintainability_index(volume: float, cyclomatic: int, code_lines: int) -> float:
    """171 - 5.2 ln(V) - 0.23 CC - 16.2 ln(LOC). Higher is more maintainable.

    V and LOC are clamped to 1 so an empty project never takes ln(0).
    """
    return (
        171
        - 5.2 * math.log(max(volume, 1))
        - 0.23 * cyclomatic
        - 16.2 * math.log(max(code_lines, 1))
    )


@dataclass
class AggregateReport:
    """Running totals across every processed file.

    Mutated by fold() as each file completes; the derived properties are
    computed from the totals on demand.
    """

    interoperability_score: float = DEFAULT_INTEROPERABILITY_SCORE

    file_count: int = 0
    parsed_count: int = 0
    skipped: List[Path] = field(default_factory=list)
    code_lines: List[int] = field(default_factory=list)

    # Halstead sums (distinct counts are summed per file, not re-unioned)
    n1: int = 0
    n2: int = 0
    N1: int = 0
    N2: int = 0
    volume: float = 0.0
    effort: float = 0.0
    time: float = 0.0
    bugs: float = 0.0

    cyclomatic: int = 0

    function_count: int = 0
    total_fan_in: int = 0
    total_fan_out: int = 0
    total_information_flow: int = 0
    information_flow_grand_total: int = 0

    declared_variables: int = 0
    live_variables: int = 0
    max_live_variables: int = 0
    parsed_code_lines: int = 0

    def fold(self, metrics: FileMetrics) -> None:
        """Add one file's results to the totals."""
        self.file_count += 1
        self.code_lines.append(metrics.lines.code)

        if not metrics.parsed:
            if metrics.is_script:
                self.skipped.append(metrics.path)
            return

        self.parsed_count += 1

        h = metrics.halstead
        self.n1 += h.n1
        self.n2 += h.n2
        self.N1 += h.N1
        self.N2 += h.N2
        self.volume += h.volume
        self.effort += h.effort
        self.time += h.time
        self.bugs += h.bugs

        self.cyclomatic += metrics.cyclomatic

        flow = metrics.information_flow
        self.function_count += flow.function_count
        self.total_fan_in += flow.total_fan_in
        self.total_fan_out += flow.total_fan_out
        self.total_information_flow += flow.total_information_flow
        self.information_flow_grand_total += flow.grand_total

        variables = metrics.variables
        self.declared_variables += variables.declared_count
        self.live_variables += variables.live_count
        self.max_live_variables = max(self.max_live_variables, variables.live_count)
        self.parsed_code_lines += metrics.lines.code

    @property
    def total_code_lines(self) -> int:
        return sum(self.code_lines)

    @property
    def dispersion(self) -> Dispersion:
        return Statistics.dispersion(self.code_lines)

    @property
    def maintainability_index(self) -> float:
        return maintainability_index(self.volume, self.cyclomatic, self.total_code_lines)

    @property
    def average_fan_in(self) -> float:
        return self.total_fan_in / (self.function_count or 1)

    @property
    def average_fan_out(self) -> float:
        return self.total_fan_out / (self.function_count or 1)

    @property
    def average_live_variables(self) -> float:
        return self.live_variables / (self.parsed_count or 1)

    def sections(self) -> "OrderedDict[str, Dict[str, MetricValue]]":
        """Metrics grouped under their report headings, in report order."""
        disp = self.dispersion
        return OrderedDict(
            [
                (
                    "SOFTWARE METRICS REPORT",
                    {
                        "Files Analyzed": self.file_count,
                        "Files Parsed": self.parsed_count,
                        "Files Skipped (unparsable)": len(self.skipped),
                        "Total Lines of Code (LOC)": self.total_code_lines,
                    },
                ),
                (
                    "HALSTEAD METRICS (DETAILED)",
                    {
                        "Distinct Operators (n1)": self.n1,
                        "Distinct Operands (n2)": self.n2,
                        "Total Operators (N1)": self.N1,
                        "Total Operands (N2)": self.N2,
                        "Program Vocabulary (n)": self.n1 + self.n2,
                        "Program Length (N)": self.N1 + self.N2,
                        "Volume": self.volume,
                        "Effort": self.effort,
                        "Time (seconds)": self.time,
                        "Estimated Bugs": self.bugs,
                    },
                ),
                ("CYCLOMATIC COMPLEXITY", {"Cyclomatic Complexity": self.cyclomatic}),
                (
                    "MAINTAINABILITY INDEX",
                    {"Maintainability Index (MI)": self.maintainability_index},
                ),
                (
                    "MEASURE OF DISPERSION (LOC)",
                    {
                        "Mean LOC per File": disp.mean,
                        "Variance": disp.variance,
                        "Standard Deviation": disp.std_dev,
                    },
                ),
                (
                    "INFORMATION FLOW METRICS",
                    {
                        "Function Count": self.function_count,
                        "Total Fan-In": self.total_fan_in,
                        "Total Fan-Out": self.total_fan_out,
                        "Average Fan-In": self.average_fan_in,
                        "Average Fan-Out": self.average_fan_out,
                        "Total Information Flow": self.total_information_flow,
                        "Grand Total": self.information_flow_grand_total,
                    },
                ),
                (
                    "LIVE VARIABLE ANALYSIS",
                    {
                        "Total Variables Declared": self.declared_variables,
                        "Total Live Variables": self.live_variables,
                        "Total Lines of Code (parsed files)": self.parsed_code_lines,
                        "Maximum Live Variables (peak)": self.max_live_variables,
                        "Average Live Variables": self.average_live_variables,
                    },
                ),
                (
                    "INTEROPERABILITY SCORE",
                    {"Interoperability Score (static, %)": self.interoperability_score},
                ),
            ]
        )

    def as_dict(self) -> "OrderedDict[str, MetricValue]":
        """Flat Metric -> Value mapping in report order."""
        flat: OrderedDict[str, MetricValue] = OrderedDict()
        for values in self.sections().values():
            flat.update(values)
        return flat

"""Metrics engine: per-file measurement and the sequential run loop.

Flow per file:
  read text → size counts
            → (script files) parse → Halstead, cyclomatic,
                                      information flow, variable usage
  → fold into the AggregateReport

Files are processed one at a time in sorted order. A file that cannot be
read aborts the run; a script that cannot be parsed only loses its
tree-derived metrics.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ..config import AnalysisConfig
from ..exceptions import ParsingError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..metrics import (
    AggregateReport,
    FileMetrics,
    count_lines,
    cyclomatic_complexity,
    halstead,
    information_flow,
    variable_usage,
)
from ..scanning import SourceScanner, TreeSitterParser

logger = get_logger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """One scanned file's contents.

    ``language`` is the grammar used for tree-derived metrics, None for
    size-only files (markup, styles, JSON).
    """

    path: Path
    text: str
    language: Optional[str] = None


class MetricsEngine:
    """Runs every metric calculator over a source tree."""

    def __init__(
        self, config: Optional[AnalysisConfig] = None, parser: Optional[TreeSitterParser] = None
    ):
        self.config = config or AnalysisConfig()
        self.parser = parser or TreeSitterParser()

    def discover(self, root_dir: Path) -> list[Path]:
        """Eligible files under root_dir, sorted."""
        return SourceScanner(root_dir, self.config).scan()

    def read(self, filepath: Path) -> SourceFile:
        """Load a file. Raises FileAccessError on I/O failure."""
        return SourceFile(
            path=filepath,
            text=safe_read_file(filepath),
            language=self.config.language_for(filepath),
        )

    def measure(self, source: SourceFile) -> FileMetrics:
        """Compute all metrics for one file.

        Unparsable scripts are logged and returned with size metrics only.
        """
        metrics = FileMetrics(
            path=source.path, lines=count_lines(source.text), language=source.language
        )
        if source.language is None:
            return metrics

        try:
            tree = self.parser.parse_strict(
                source.text.encode("utf-8"), source.language, source.path
            )
        except ParsingError as e:
            logger.warning(f"Skipping unparsable file: {source.path} ({e.reason})")
            return metrics

        metrics.halstead = halstead(tree)
        metrics.cyclomatic = cyclomatic_complexity(tree)
        metrics.information_flow = information_flow(tree)
        metrics.variables = variable_usage(tree)
        return metrics

    def run_files(self, files: Iterable[Path]) -> AggregateReport:
        """Measure and fold the given files in order."""
        report = AggregateReport(interoperability_score=self.config.interoperability_score)
        for filepath in files:
            metrics = self.measure(self.read(filepath))
            logger.debug(
                f"{filepath}: {metrics.lines.code} code lines, "
                f"{'parsed' if metrics.parsed else 'size only'}"
            )
            report.fold(metrics)
        return report

    def run(self, root_dir: Path) -> AggregateReport:
        """Discover, measure and aggregate every eligible file under root_dir."""
        files = self.discover(root_dir)
        logger.info(f"Analyzing {len(files)} files under {root_dir}")
        report = self.run_files(files)
        if report.skipped:
            logger.info(f"{len(report.skipped)} unparsable file(s) skipped for tree metrics")
        return report

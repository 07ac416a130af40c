"""
Halstead Insight - static software-quality metrics for JavaScript projects

Size counts, Halstead measures, cyclomatic complexity, fan-in/fan-out
information flow, declared/used variables, LOC dispersion and a
maintainability index, computed over a whole source tree.

Named after Maurice Halstead, author of Elements of Software Science.
"""

__version__ = "0.1.0"

from .api import analyze
from .metrics import AggregateReport, FileMetrics

__all__ = [
    "analyze",
    "AggregateReport",
    "FileMetrics",
]

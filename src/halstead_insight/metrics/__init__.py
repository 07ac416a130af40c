"""Metric calculators: each consumes one file's text or syntax tree."""

from .aggregate import AggregateReport, maintainability_index
from .cyclomatic import cyclomatic_complexity
from .halstead import halstead
from .information_flow import information_flow
from .models import (
    GLOBAL_SCOPE,
    FileMetrics,
    FunctionNode,
    HalsteadTally,
    InformationFlow,
    LineCounts,
    VariableUsage,
)
from .size import count_lines
from .variables import variable_usage

__all__ = [
    "AggregateReport",
    "FileMetrics",
    "FunctionNode",
    "GLOBAL_SCOPE",
    "HalsteadTally",
    "InformationFlow",
    "LineCounts",
    "VariableUsage",
    "count_lines",
    "cyclomatic_complexity",
    "halstead",
    "information_flow",
    "maintainability_index",
    "variable_usage",
]

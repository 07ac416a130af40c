"""Exception hierarchy for Halstead Insight."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
)
from .base import HalsteadInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "HalsteadInsightError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]

"""Analysis-related exceptions: file access and parsing."""

from pathlib import Path

from .base import HalsteadInsightError


class AnalysisError(HalsteadInsightError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a candidate file cannot be read. Aborts the run."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a script file cannot be turned into a syntax tree.

    The engine recovers from this per file: only the tree-derived metrics
    of that file are skipped.
    """

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason

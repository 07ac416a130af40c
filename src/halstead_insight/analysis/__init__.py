"""Run driver tying scanning, parsing and metric calculation together."""

from .engine import MetricsEngine, SourceFile

__all__ = ["MetricsEngine", "SourceFile"]

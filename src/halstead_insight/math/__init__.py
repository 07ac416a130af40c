"""Numerical helpers for aggregate metrics."""

from .statistics import Dispersion, Statistics

__all__ = ["Dispersion", "Statistics"]

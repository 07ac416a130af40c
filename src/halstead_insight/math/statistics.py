"""Descriptive statistics over per-file values."""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Dispersion:
    """Population mean, variance and standard deviation."""

    mean: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0


class Statistics:
    """Statistical analysis methods."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Compute arithmetic mean."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def population_variance(values: Sequence[float]) -> float:
        """Variance dividing by n (not n - 1)."""
        if len(values) == 0:
            return 0.0
        return max(0.0, float(np.var(values, ddof=0)))

    @staticmethod
    def dispersion(values: Sequence[float]) -> Dispersion:
        """
        Spread of a metric across files.

        variance = sum((x - mean)^2) / n, std_dev = sqrt(variance).
        Empty input gives all zeros.

        Args:
            values: One value per file

        Returns:
            Dispersion
        """
        variance = Statistics.population_variance(values)
        return Dispersion(
            mean=Statistics.mean(values),
            variance=variance,
            std_dev=math.sqrt(variance),
        )

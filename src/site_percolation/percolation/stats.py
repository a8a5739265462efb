"""
Monte Carlo estimation of the percolation threshold.

Each trial starts from a fully blocked n x n system and opens uniformly
random sites until it percolates. The fraction of open sites at that moment
is one sample of the threshold. PercolationStats runs m independent trials
and reports the sample mean, sample standard deviation and a confidence
interval under a normal approximation.
"""

import math
from typing import Optional, Tuple, Type

import numpy as np
from scipy.stats import norm

from .base import Percolation, check_size
from .uf_percolation import UFPercolation

# z value of the classical two-sided 95% interval
Z_95 = 1.96


def run_trial(n: int, rng: np.random.Generator,
              model: Type[Percolation] = UFPercolation) -> float:
    """
    Run a single percolation experiment.

    Args:
        n: Side length of the grid
        rng: Source of uniform random integers
        model: Percolation implementation to instantiate

    Returns:
        Fraction of sites open when the system first percolates
    """
    perc = model(n)
    while not perc.percolates():
        i = rng.integers(n)
        j = rng.integers(n)
        if not perc.is_open(i, j):
            perc.open(i, j)
    return perc.number_of_open_sites() / (n * n)


class PercolationStats:
    """
    Threshold statistics over m independent experiments on an n x n system.

    All trials run on construction; every trial gets its own UFPercolation.

    Example:
        stats = PercolationStats(200, 100, seed=0)
        stats.mean()                    # ~0.593
        stats.confidence_interval()     # (low, high)
    """

    def __init__(self, n: int, m: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Perform m independent experiments on an n x n system.

        Args:
            n: Side length of the grid, must be > 0
            m: Number of trials, must be > 0
            seed: Seed for numpy.random.default_rng (ignored if rng is given)
            rng: Random generator to draw sites from
        """
        self.n = check_size(n, 'n')
        self.m = check_size(m, 'm')

        if rng is None:
            rng = np.random.default_rng(seed)

        self._x = np.array([run_trial(self.n, rng) for _ in range(self.m)],
                           dtype=np.float64)

    @property
    def thresholds(self) -> np.ndarray:
        """Threshold sample of every trial, in the order they ran."""
        return self._x.copy()

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self._x))

    def stddev(self) -> float:
        """Sample standard deviation of the threshold, nan when m == 1."""
        if self.m == 1:
            return math.nan
        return float(np.std(self._x, ddof=1))

    def confidence_low(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - Z_95 * self.stddev() / math.sqrt(self.m)

    def confidence_high(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + Z_95 * self.stddev() / math.sqrt(self.m)

    def confidence_interval(self, level: float = 0.95) -> Tuple[float, float]:
        """
        Two-sided confidence interval for the mean threshold.

        Only a level of exactly 0.95 uses the classical z = 1.96, so the
        default interval matches confidence_low() and confidence_high(). Any
        other level takes z from the standard normal quantile.

        Args:
            level: Confidence level in (0, 1)

        Returns:
            (low, high) tuple
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"Confidence level must be in (0, 1), got {level}")

        if level == 0.95:
            z = Z_95
        else:
            z = float(norm.ppf(0.5 + level / 2.0))

        half_width = z * self.stddev() / math.sqrt(self.m)
        return self.mean() - half_width, self.mean() + half_width

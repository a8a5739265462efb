"""Tests for the Monte Carlo threshold driver."""

import math

import numpy as np
import pytest

from site_percolation.percolation import (
    ArrayPercolation,
    UFPercolation,
    InvalidArgumentError,
    PercolationStats,
    run_trial,
)


class TestRunTrial:
    """Tests for a single experiment."""

    def test_single_site_threshold(self):
        """A 1 x 1 system percolates after its only site opens."""
        assert run_trial(1, np.random.default_rng(0)) == 1.0

    def test_two_by_two_thresholds(self):
        """A 2 x 2 system percolates after two or three sites."""
        rng = np.random.default_rng(1)
        samples = {run_trial(2, rng) for _ in range(50)}

        assert samples <= {0.5, 0.75}

    def test_models_agree(self):
        """Both models consume the same draws and give the same threshold."""
        for seed in range(5):
            uf_x = run_trial(6, np.random.default_rng(seed), model=UFPercolation)
            array_x = run_trial(6, np.random.default_rng(seed), model=ArrayPercolation)
            assert uf_x == array_x


class TestPercolationStats:
    """Tests for PercolationStats."""

    @pytest.mark.parametrize("n,m", [(0, 5), (-1, 5), (5, 0), (5, -1)])
    def test_invalid_arguments(self, n, m):
        """Non-positive n or m raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            PercolationStats(n, m)

    def test_single_site_system(self):
        """Every trial on a 1 x 1 system has threshold exactly 1."""
        stats = PercolationStats(1, 5)

        assert np.all(stats.thresholds == 1.0)
        assert stats.mean() == 1.0
        assert stats.stddev() == 0.0
        assert stats.confidence_low() == 1.0
        assert stats.confidence_high() == 1.0

    def test_single_trial(self):
        """Standard deviation and interval are nan with one trial."""
        stats = PercolationStats(4, 1, seed=0)

        assert 0.0 < stats.mean() <= 1.0
        assert math.isnan(stats.stddev())
        assert math.isnan(stats.confidence_low())
        assert math.isnan(stats.confidence_high())

    def test_samples(self):
        """One sample per trial, each in (0, 1]."""
        stats = PercolationStats(10, 20, seed=7)
        x = stats.thresholds

        assert x.shape == (20,)
        assert np.all(x > 0.0)
        assert np.all(x <= 1.0)

    def test_thresholds_is_a_copy(self):
        """Modifying the returned samples does not change the statistics."""
        stats = PercolationStats(5, 4, seed=3)
        mean = stats.mean()
        stats.thresholds[:] = 0.0

        assert stats.mean() == mean

    def test_statistics(self):
        """Mean, sample stddev and interval follow their definitions."""
        stats = PercolationStats(8, 30, seed=11)
        x = stats.thresholds
        half = 1.96 * np.std(x, ddof=1) / np.sqrt(30)

        assert stats.mean() == pytest.approx(np.mean(x))
        assert stats.stddev() == pytest.approx(np.std(x, ddof=1))
        assert stats.confidence_low() == pytest.approx(np.mean(x) - half)
        assert stats.confidence_high() == pytest.approx(np.mean(x) + half)
        assert stats.confidence_low() <= stats.mean() <= stats.confidence_high()

    def test_seed_is_reproducible(self):
        """The same seed gives the same samples."""
        a = PercolationStats(10, 10, seed=42)
        b = PercolationStats(10, 10, seed=42)

        np.testing.assert_array_equal(a.thresholds, b.thresholds)

    def test_injected_rng(self):
        """An explicit generator is used instead of the seed."""
        a = PercolationStats(10, 10, rng=np.random.default_rng(5))
        b = PercolationStats(10, 10, seed=99, rng=np.random.default_rng(5))

        np.testing.assert_array_equal(a.thresholds, b.thresholds)

    def test_confidence_interval(self):
        """The default interval matches the 1.96 bounds; wider levels widen it."""
        stats = PercolationStats(8, 25, seed=2)
        low, high = stats.confidence_interval()
        low_99, high_99 = stats.confidence_interval(0.99)

        assert (low, high) == (stats.confidence_low(), stats.confidence_high())
        assert low_99 < low
        assert high_99 > high

    def test_only_exact_default_level_uses_classical_z(self):
        """A level just off 0.95 uses the normal quantile, not 1.96."""
        stats = PercolationStats(8, 25, seed=2)
        low, high = stats.confidence_interval(0.95)
        near_low, near_high = stats.confidence_interval(0.9500001)

        assert (high - low) / 2 == pytest.approx(1.96 * stats.stddev() / 5)
        assert (near_high - near_low) / 2 == pytest.approx(1.959964 * stats.stddev() / 5, rel=1e-5)
        assert near_high - near_low < high - low

    @pytest.mark.parametrize("level", [0.0, 1.0, 1.5])
    def test_invalid_confidence_level(self, level):
        """Levels outside (0, 1) are rejected."""
        stats = PercolationStats(2, 3, seed=0)

        with pytest.raises(ValueError):
            stats.confidence_interval(level)

    def test_converges_to_known_threshold(self):
        """The mean threshold of a large system is close to 0.593."""
        stats = PercolationStats(100, 50, seed=2026)

        assert 0.55 <= stats.mean() <= 0.62
        assert stats.confidence_low() < stats.confidence_high()

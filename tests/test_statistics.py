import unittest

import numpy as np

from mcquad.core.statistics import RunningStatistics


class RunningStatisticsTests(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(2016)
        self.values = rng.normal(loc=0.3, scale=2.0, size=5000)

    def test_mean_matches_arithmetic_mean(self) -> None:
        for n in (1, 2, 7, 100, 5000):
            stats = RunningStatistics().observe_many(self.values[:n])
            expected = float(np.sum(self.values[:n]) / n)
            self.assertEqual(stats.count, n)
            self.assertLess(abs(stats.mean - expected), 1e-9 * max(1.0, abs(expected)))

    def test_variance_matches_two_pass_sample_variance(self) -> None:
        for n, tolerance in ((2, 1e-12), (10, 1e-11), (1000, 1e-9), (5000, 1e-8)):
            stats = RunningStatistics().observe_many(self.values[:n])
            expected = float(np.var(self.values[:n], ddof=1))
            self.assertLess(abs(stats.variance - expected), tolerance * max(1.0, expected))

    def test_two_observations(self) -> None:
        stats = RunningStatistics().observe_many([1.0, 3.0])
        self.assertAlmostEqual(stats.mean, 2.0)
        self.assertAlmostEqual(stats.variance, 2.0)

    def test_single_observation_leaves_variance_at_initial_value(self) -> None:
        stats = RunningStatistics()
        stats.observe(0.75)
        self.assertEqual(stats.mean, 0.75)
        self.assertEqual(stats.variance, 0.0)
        self.assertEqual(stats.standard_error, 0.0)

    def test_variance_uses_mean_before_update(self) -> None:
        stats = RunningStatistics().observe_many([4.0, 8.0])
        stats.observe(0.0)
        # ((3-2)/(3-1)) * 8 + (1/3) * (0 - 6)**2, with 6 the mean of the first two
        self.assertAlmostEqual(stats.variance, 0.5 * 8.0 + 36.0 / 3.0)
        self.assertAlmostEqual(stats.mean, 4.0)

    def test_mean_only_mode_skips_variance(self) -> None:
        stats = RunningStatistics(track_variance=False).observe_many(self.values[:50])
        self.assertEqual(stats.variance, 0.0)
        self.assertAlmostEqual(stats.mean, float(np.mean(self.values[:50])), places=12)

    def test_standard_error(self) -> None:
        stats = RunningStatistics().observe_many(self.values[:400])
        self.assertAlmostEqual(stats.standard_error, (stats.variance / 400) ** 0.5)


if __name__ == "__main__":
    unittest.main()

import unittest

from mcquad.core.distributor import (
    RemainderPolicy,
    derive_base_seed,
    executed_trials,
    plan,
    worker_seed,
)


class PlanTests(unittest.TestCase):
    def test_even_split(self) -> None:
        assignments = plan(12, 4, base_seed=100)
        self.assertEqual([a.trial_count for a in assignments], [3, 3, 3, 3])
        self.assertEqual([a.worker_id for a in assignments], [0, 1, 2, 3])
        self.assertEqual([a.offset for a in assignments], [0, 3, 6, 9])

    def test_remainder_dropped_by_default(self) -> None:
        with self.assertLogs("mcquad.core.distributor", level="WARNING"):
            assignments = plan(10, 4, base_seed=1)
        self.assertEqual([a.trial_count for a in assignments], [2, 2, 2, 2])
        self.assertEqual(executed_trials(assignments), 8)

    def test_redistribute_runs_every_trial(self) -> None:
        assignments = plan(10, 4, base_seed=1, policy=RemainderPolicy.REDISTRIBUTE)
        self.assertEqual([a.trial_count for a in assignments], [3, 3, 2, 2])
        self.assertEqual([a.offset for a in assignments], [0, 3, 6, 8])
        self.assertEqual(executed_trials(assignments), 10)

    def test_partition_properties(self) -> None:
        for total in range(0, 40):
            for workers in range(1, 9):
                assignments = plan(total, workers, base_seed=1234)
                counts = {a.trial_count for a in assignments}
                self.assertEqual(len(counts), 1)
                self.assertEqual(executed_trials(assignments), (total // workers) * workers)
                self.assertLessEqual(executed_trials(assignments), total)
                seeds = [a.seed for a in assignments]
                self.assertEqual(len(set(seeds)), workers)

    def test_seeds_are_offsets_of_base(self) -> None:
        assignments = plan(8, 3, base_seed=1700000000)
        self.assertEqual([a.seed for a in assignments], [1700000000, 1700000001, 1700000002])
        self.assertEqual(worker_seed(10, 2), 12)

    def test_fewer_trials_than_workers(self) -> None:
        assignments = plan(3, 4, base_seed=0)
        self.assertEqual(executed_trials(assignments), 0)

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            plan(10, 0, base_seed=1)
        with self.assertRaises(ValueError):
            plan(-1, 2, base_seed=1)
        with self.assertRaises(ValueError):
            plan(10, 2, base_seed=-5)


class BaseSeedTests(unittest.TestCase):
    def test_seed_from_clock(self) -> None:
        self.assertEqual(derive_base_seed(lambda: 1459987200.75), 1459987200)

    def test_seed_defaults_to_wall_clock(self) -> None:
        self.assertGreater(derive_base_seed(), 1_600_000_000)


if __name__ == "__main__":
    unittest.main()

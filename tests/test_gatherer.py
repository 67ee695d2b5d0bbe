import unittest

import numpy as np

from mcquad.core.distributor import RemainderPolicy, plan
from mcquad.core.gatherer import gather_results
from mcquad.models.results import ResultSet


class GatherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.assignments = plan(10, 4, base_seed=50)
        self.local = [[rank * 10.0 + idx for idx in range(2)] for rank in range(4)]

    def test_worker_major_order(self) -> None:
        results = gather_results(self.local, self.assignments)
        self.assertEqual(len(results), 8)
        np.testing.assert_array_equal(
            results.trial_means, [0.0, 1.0, 10.0, 11.0, 20.0, 21.0, 30.0, 31.0]
        )

    def test_index_maps_back_to_worker_and_local_trial(self) -> None:
        results = gather_results(self.local, self.assignments)
        per_worker = self.assignments[0].trial_count
        for k in range(len(results)):
            self.assertEqual(results.worker_of(k), k // per_worker)
            self.assertEqual(results.local_index(k), k % per_worker)
            self.assertEqual(results.trial_means[k], self.local[k // per_worker][k % per_worker])

    def test_uneven_assignment_lookup(self) -> None:
        assignments = plan(10, 4, base_seed=50, policy=RemainderPolicy.REDISTRIBUTE)
        local = [[float(rank)] * a.trial_count for rank, a in enumerate(assignments)]
        results = gather_results(local, assignments)
        self.assertEqual([results.worker_of(k) for k in range(10)], [0, 0, 0, 1, 1, 1, 2, 2, 3, 3])
        self.assertEqual(results.local_index(7), 1)
        np.testing.assert_array_equal(results.worker_slice(2), [2.0, 2.0])

    def test_length_mismatch_rejected(self) -> None:
        local = list(self.local)
        local[2] = [1.0]
        with self.assertRaises(ValueError):
            gather_results(local, self.assignments)

    def test_missing_worker_rejected(self) -> None:
        with self.assertRaises(ValueError):
            gather_results(self.local[:3], self.assignments)

    def test_metadata_carried(self) -> None:
        results = gather_results(self.local, self.assignments, samples_per_trial=1000, base_seed=50)
        self.assertEqual(results.samples_per_trial, 1000)
        self.assertEqual(results.base_seed, 50)
        self.assertEqual(results.worker_count, 4)


class ResultSetTests(unittest.TestCase):
    def test_result_set_is_read_only(self) -> None:
        results = ResultSet(trial_means=[0.5, 0.4], worker_trial_counts=[1, 1])
        with self.assertRaises(ValueError):
            results.trial_means[0] = 1.0

    def test_counts_must_match_values(self) -> None:
        with self.assertRaises(ValueError):
            ResultSet(trial_means=[0.5, 0.4, 0.3], worker_trial_counts=[1, 1])

    def test_index_out_of_range(self) -> None:
        results = ResultSet(trial_means=[0.5], worker_trial_counts=[1])
        with self.assertRaises(IndexError):
            results.worker_of(1)

    def test_frame_and_summary(self) -> None:
        results = ResultSet(trial_means=[0.4, 0.6, 0.5, 0.5], worker_trial_counts=[2, 2])
        frame = results.to_frame()
        self.assertEqual(list(frame.columns), ["trial", "worker_id", "local_index", "mean"])
        self.assertEqual(frame["worker_id"].tolist(), [0, 0, 1, 1])
        self.assertEqual(frame["local_index"].tolist(), [0, 1, 0, 1])
        summary = results.summary()
        self.assertEqual(summary["count"], 4)
        self.assertAlmostEqual(summary["mean"], 0.5)
        self.assertAlmostEqual(summary["min"], 0.4)
        self.assertAlmostEqual(summary["max"], 0.6)


if __name__ == "__main__":
    unittest.main()

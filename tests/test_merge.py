import unittest
import warnings
from ecdfPy import (build_sorted_reference, build_permutation, check_permutation,
                    rank_by_binary_search, rank_by_merge_scan, scan_cursor, lower_bounds,
                    InvalidArgumentError)
import numpy as np

class TestMergeScan(unittest.TestCase):

    def setUp(self):
        rng = np.random.default_rng(11)
        self.reference = rng.integers(0, 50, size=300).astype(float)
        self.observations = rng.integers(-5, 60, size=250).astype(float)
        self.ref = build_sorted_reference(self.reference)
        self.perm = build_permutation(self.observations)

    def test_permutation_sorts(self):
        self.assertEqual(sorted(self.perm.tolist()), list(range(len(self.observations))))
        ordered = self.observations[self.perm]
        self.assertTrue(np.all(ordered[1:] >= ordered[:-1]))

    def test_cursor_monotone(self):
        steps = list(scan_cursor(self.observations, self.ref.values, self.perm))
        cursor = [j for _, j in steps]
        self.assertEqual(len(steps), len(self.observations))
        self.assertTrue(all(a <= b for a, b in zip(cursor, cursor[1:])))
        self.assertEqual([p for p, _ in steps], self.perm.tolist())

    def test_cursor_stops_at_end(self):
        values = [1.0, 2.0]
        steps = list(scan_cursor([5.0, 3.0, 9.0], values, [1, 0, 2]))
        self.assertEqual(steps, [(1, 2), (0, 2), (2, 2)])

    def test_cursor_start(self):
        values = self.ref.values
        first = self.observations[self.perm[0]]
        start = int(lower_bounds(values, np.array([first]))[0])
        from_zero = list(scan_cursor(self.observations, values, self.perm))
        from_start = list(scan_cursor(self.observations, values, self.perm, start))
        self.assertEqual(from_zero, from_start)

    def test_tie_order_irrelevant(self):
        # reverse the order within each group of equal observations
        keys = np.lexsort((-np.arange(len(self.observations)), self.observations))
        expected = rank_by_merge_scan(self.observations, self.ref, self.perm)
        np.testing.assert_array_equal(rank_by_merge_scan(self.observations, self.ref, keys), expected)

    def test_shuffled_observations(self):
        rng = np.random.default_rng(3)
        shuffled = rng.permutation(self.observations)
        np.testing.assert_array_equal(
            rank_by_merge_scan(shuffled, self.ref),
            rank_by_binary_search(shuffled, self.ref))

    def test_all_observations_above_reference(self):
        obs = np.array([100.0, 200.0, 100.0])
        np.testing.assert_array_equal(rank_by_merge_scan(obs, self.ref), [300, 300, 300])

    def test_permutation_length_mismatch(self):
        with self.assertRaises(InvalidArgumentError):
            rank_by_merge_scan(self.observations, self.ref, self.perm[:-1])
        with self.assertRaises(InvalidArgumentError):
            rank_by_merge_scan(self.observations, self.ref, self.perm[:-1], check=False)

    def test_permutation_not_bijection(self):
        perm = self.perm.copy()
        perm[1] = perm[0]
        with self.assertRaises(InvalidArgumentError):
            rank_by_merge_scan(self.observations, self.ref, perm)

    def test_permutation_out_of_range(self):
        perm = self.perm.copy()
        perm[0] = len(perm)
        with self.assertRaises(InvalidArgumentError):
            check_permutation(perm, self.observations)

    def test_permutation_not_ordering(self):
        with self.assertRaises(InvalidArgumentError):
            check_permutation(self.perm[::-1], self.observations)

    def test_permutation_dtype(self):
        with self.assertRaises(InvalidArgumentError):
            check_permutation(self.perm.astype(float), self.observations)
        with self.assertRaises(InvalidArgumentError):
            check_permutation(self.perm.reshape(-1, 1), self.observations)

    def test_unchecked_permutation(self):
        rank = rank_by_merge_scan(self.observations, self.ref, self.perm, check=False)
        np.testing.assert_array_equal(rank, rank_by_binary_search(self.observations, self.ref))

    def test_too_many_chunks_warns(self):
        obs = np.array([3.0, 1.0, 2.0])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            rank = rank_by_merge_scan(obs, self.ref, chunks=10, workers=2)
        self.assertTrue(any("chunks" in str(w.message) for w in caught))
        np.testing.assert_array_equal(rank, rank_by_binary_search(obs, self.ref))

if __name__ == '__main__':
    unittest.main()

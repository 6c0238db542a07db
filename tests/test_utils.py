"""Tests for validation helpers and CPU timing."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from peaceful_queens.timing import CpuTimer, cpu_time, format_cpu_time
from peaceful_queens.utils import (
    brute_force_count,
    brute_force_solutions,
    conflicts,
    conflicts_on2,
    is_permutation,
    is_valid_solution,
)


class ValidationTests(unittest.TestCase):
    def test_conflict_counters_agree(self):
        boards = [(0, 1, 2, 3), (1, 3, 0, 2), (0, 0, 0), (3, 1, 2, 0), (4, 2, 0, 3, 1)]
        for board in boards:
            with self.subTest(board=board):
                self.assertEqual(conflicts(board), conflicts_on2(board))

    def test_conflicts_of_identity(self):
        self.assertEqual(conflicts((0, 1, 2, 3)), 6)

    def test_valid_solutions(self):
        self.assertTrue(is_valid_solution((1, 3, 0, 2)))
        self.assertTrue(is_valid_solution((0,)))

    def test_invalid_solutions(self):
        self.assertFalse(is_valid_solution(()))
        self.assertFalse(is_valid_solution((0, 1, 2, 3)))
        self.assertFalse(is_valid_solution((1, 3, 0, 4)))
        self.assertFalse(is_valid_solution((1.0, 3, 0, 2)))

    def test_is_permutation(self):
        self.assertTrue(is_permutation((2, 0, 1)))
        self.assertFalse(is_permutation((2, 2, 1)))

    def test_brute_force_reference(self):
        self.assertEqual(brute_force_solutions(4), [(1, 3, 0, 2), (2, 0, 3, 1)])
        self.assertEqual([brute_force_count(n) for n in range(1, 7)], [1, 0, 0, 2, 10, 4])


class TimingTests(unittest.TestCase):
    def test_cpu_timer_measures_work(self):
        with CpuTimer() as timer:
            sum(i * i for i in range(20000))
        self.assertGreaterEqual(timer.elapsed, 0.0)
        self.assertGreaterEqual(cpu_time(), timer.elapsed)

    def test_format_cpu_time(self):
        self.assertEqual(format_cpu_time(0.0123), "0.012s")
        self.assertEqual(format_cpu_time(65.2), "1m 05.2s")

    def test_format_cpu_time_rounds_before_splitting_minutes(self):
        self.assertEqual(format_cpu_time(119.97), "2m 00.0s")
        self.assertEqual(format_cpu_time(59.9996), "1m 00.0s")
        self.assertEqual(format_cpu_time(59.9994), "59.999s")


if __name__ == "__main__":
    unittest.main()

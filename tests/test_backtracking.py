"""Tests for the Peaceful Queens search engine."""

from pathlib import Path
import sys
import time
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from peaceful_queens.backtracking import QueenSearch, search
from peaceful_queens.sinks import CollectingSink, CountingSink
from peaceful_queens.utils import brute_force_solutions, is_permutation, is_valid_solution

KNOWN_COUNTS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}


class _FailingSink:
    def __init__(self, fail_at: int):
        self.fail_at = fail_at
        self.calls = 0

    def accept(self, placement, size, index):
        self.calls += 1
        if index == self.fail_at:
            raise OSError("disk full")


class _SlowSink(CountingSink):
    def accept(self, placement, size, index):
        super().accept(placement, size, index)
        time.sleep(0.02)


class _MutatingSink:
    def accept(self, placement, size, index):
        try:
            placement[0] = -1
        except TypeError:
            pass


class SearchCountTests(unittest.TestCase):
    def test_known_solution_counts(self):
        for n, expected in KNOWN_COUNTS.items():
            with self.subTest(n=n):
                self.assertEqual(search(n, CountingSink()), expected)

    def test_count_matches_brute_force(self):
        for n in range(1, 7):
            with self.subTest(n=n):
                sink = CollectingSink()
                search(n, sink)
                self.assertEqual(sorted(sink.solutions), brute_force_solutions(n))

    def test_return_value_equals_sink_invocations(self):
        sink = CountingSink()
        self.assertEqual(search(8, sink), sink.count)

    def test_board_of_four(self):
        sink = CollectingSink()
        self.assertEqual(search(4, sink), 2)
        self.assertEqual(sorted(sink.solutions), [(1, 3, 0, 2), (2, 0, 3, 1)])


class PlacementPropertyTests(unittest.TestCase):
    def setUp(self):
        self.sink = CollectingSink()
        search(7, self.sink)

    def test_every_placement_is_a_permutation(self):
        for placement in self.sink.solutions:
            self.assertTrue(is_permutation(placement), placement)

    def test_no_two_queens_attack(self):
        for placement in self.sink.solutions:
            for i in range(7):
                for j in range(i + 1, 7):
                    self.assertNotEqual(abs(placement[i] - placement[j]), j - i, placement)
            self.assertTrue(is_valid_solution(placement))

    def test_no_duplicates(self):
        self.assertEqual(len(set(self.sink.solutions)), len(self.sink.solutions))

    def test_indices_are_sequential(self):
        self.assertEqual(self.sink.indices, list(range(40)))


class EngineStateTests(unittest.TestCase):
    def test_buffers_restored_after_search(self):
        engine = QueenSearch(6)
        engine.run(CountingSink())
        self.assertEqual(engine.permutation, tuple(range(6)))
        self.assertTrue(engine.is_reset())

    def test_runs_are_deterministic(self):
        first, second = CollectingSink(), CollectingSink()
        search(8, first)
        search(8, second)
        self.assertEqual(first.solutions, second.solutions)

    def test_engine_can_be_reused(self):
        engine = QueenSearch(5)
        first = engine.run(CollectingSink())
        second = engine.run(CollectingSink())
        self.assertEqual(first.solutions, second.solutions)
        self.assertEqual(first.nodes, second.nodes)

    def test_sink_receives_snapshot(self):
        engine = QueenSearch(5)
        result = engine.run(_MutatingSink())
        self.assertEqual(result.solutions, 10)
        self.assertTrue(engine.is_reset())

    def test_result_metrics(self):
        result = QueenSearch(6).run(CountingSink())
        self.assertEqual(result.size, 6)
        self.assertEqual(result.solutions, 4)
        self.assertGreater(result.nodes, 0)
        self.assertGreaterEqual(result.elapsed, 0.0)
        self.assertGreaterEqual(result.cpu_time, 0.0)
        self.assertFalse(result.timed_out)


class ErrorHandlingTests(unittest.TestCase):
    def test_zero_size_rejected(self):
        with self.assertRaises(ValueError):
            search(0, CountingSink())

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            QueenSearch(-3)

    def test_non_integer_size_rejected(self):
        for bad in (4.0, "4", True):
            with self.subTest(size=bad):
                with self.assertRaises(TypeError):
                    QueenSearch(bad)

    def test_numpy_integer_size_accepted(self):
        import numpy as np

        engine = QueenSearch(np.int64(5))
        self.assertIs(type(engine.size), int)
        self.assertEqual(engine.run(CountingSink()).solutions, 10)

    def test_sink_failure_propagates(self):
        engine = QueenSearch(6)
        sink = _FailingSink(fail_at=1)
        with self.assertRaises(OSError):
            engine.run(sink)
        self.assertEqual(sink.calls, 2)
        self.assertTrue(engine.is_reset())

    def test_time_limit_stops_search(self):
        engine = QueenSearch(10)
        sink = _SlowSink()
        result = engine.run(sink, time_limit=0.001)
        self.assertTrue(result.timed_out)
        self.assertEqual(result.solutions, sink.count)
        self.assertLess(result.solutions, 724)
        self.assertTrue(engine.is_reset())


if __name__ == "__main__":
    unittest.main()

"""Batch enumeration runs over a range of board sizes.

For every N the full search is repeated ``runs`` times: the solution count and
node count are deterministic, so they are taken from the first run, while wall
and CPU times are summarized across all runs.

Outputs are structured dictionaries suitable for CSV export and plotting.
Validation optionally checks every placement and cross-checks counts against
brute force for small boards.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from . import settings
from .stats import (
    EnumerationResults,
    ProgressPrinter,
    RunRecord,
    SizeEntry,
    compute_detailed_statistics,
)
from peaceful_queens.backtracking import QueenSearch
from peaceful_queens.sinks import CollectingSink, CountingSink
from peaceful_queens.utils import brute_force_count, is_valid_solution


class ValidatingSink:
    """Counting sink that asserts every placement is a valid solution."""

    def __init__(self) -> None:
        self.count = 0
        self._seen = set()

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        if len(placement) != size or not is_valid_solution(placement):
            raise AssertionError(f"Invalid placement produced for N={size}: {placement}")
        key = tuple(placement)
        if key in self._seen:
            raise AssertionError(f"Duplicate placement produced for N={size}: {placement}")
        if index != self.count:
            raise AssertionError(f"Out-of-order solution index {index} (expected {self.count})")
        self._seen.add(key)
        self.count += 1


def run_single_enumeration(n: int, time_limit: Optional[float] = None, validate: bool = False) -> RunRecord:
    """Run one full search for ``n`` and return its metrics."""
    sink = ValidatingSink() if validate else CountingSink()
    result = QueenSearch(n).run(sink, time_limit=time_limit)
    if validate and sink.count != result.solutions:
        raise AssertionError(f"Sink saw {sink.count} solutions but search reported {result.solutions} for N={n}")
    return {
        "solutions": result.solutions,
        "nodes": result.nodes,
        "time": result.elapsed,
        "cpu_time": result.cpu_time,
        "timeout": result.timed_out,
    }


def run_enumeration_experiments(
    n_values: List[int],
    runs: int = 1,
    time_limit: Optional[float] = None,
    validate: bool = False,
    progress_label: Optional[str] = None,
    known_counts: Optional[Dict[int, int]] = None,
) -> EnumerationResults:
    """Enumerate every N in ``n_values`` ``runs`` times and aggregate results.

    When ``validate`` is set, each placement is checked and the count must
    match brute force for ``N <= settings.BRUTE_FORCE_MAX_N``, or the count
    stored in ``known_counts`` for larger boards. A timed-out run stops the
    remaining repetitions for that N; the entry is only flagged as timed out
    when the first run, whose count is reported, did not finish.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    results: EnumerationResults = {}
    progress = ProgressPrinter(len(n_values), progress_label) if progress_label else None

    for index, n in enumerate(n_values, start=1):
        if progress:
            progress.update(index, f"N={n}")

        raw_runs: List[RunRecord] = []
        for _ in range(runs):
            record = run_single_enumeration(n, time_limit=time_limit, validate=validate)
            raw_runs.append(record)
            if record["timeout"]:
                break

        first = raw_runs[0]
        timed_out = first["timeout"]
        reference: Optional[int] = None
        if validate and not timed_out:
            if n <= settings.BRUTE_FORCE_MAX_N:
                reference, source = brute_force_count(n), "brute force"
            elif known_counts and n in known_counts:
                reference, source = known_counts[n], "stored count"
            if reference is not None and reference != first["solutions"]:
                raise AssertionError(
                    f"Search found {first['solutions']} solutions for N={n}, {source} is {reference}"
                )

        entry: SizeEntry = {
            "n": n,
            "solutions": first["solutions"],
            "nodes": first["nodes"],
            "timed_out": timed_out,
            "total_runs": len(raw_runs),
            "time": compute_detailed_statistics([r["time"] for r in raw_runs], "time"),
            "cpu_time": compute_detailed_statistics([r["cpu_time"] for r in raw_runs], "cpu_time"),
            "brute_force_count": reference if n <= settings.BRUTE_FORCE_MAX_N else None,
            "raw_runs": raw_runs,
        }
        results[n] = entry

        status = " (timed out, partial count)" if timed_out else ""
        print(f"  N={n}: {entry['solutions']} solutions, {entry['nodes']} nodes{status}")

    return results


def collect_solutions(n: int) -> List[Tuple[int, ...]]:
    """Return every placement for ``n`` in enumeration order."""
    sink = CollectingSink()
    QueenSearch(n).run(sink)
    return sink.solutions


def counts_by_size(results: EnumerationResults) -> Dict[int, int]:
    """Map N to its solution count, skipping sizes whose search timed out."""
    counts: Dict[int, int] = {}
    for n, entry in results.items():
        if not entry.get("timed_out", False):
            counts[n] = entry["solutions"]
    return counts

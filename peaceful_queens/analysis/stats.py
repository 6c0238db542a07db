"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for enumeration outputs and provides utilities
to summarize the repeated timing runs recorded per board size.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    solutions: int
    nodes: int
    time: float
    cpu_time: float
    timeout: bool


class SizeEntry(TypedDict, total=False):
    n: int
    solutions: int
    nodes: int
    timed_out: bool
    total_runs: int
    time: StatsSummary
    cpu_time: StatsSummary
    brute_force_count: Optional[int]
    raw_runs: List[RunRecord]


EnumerationResults = Dict[int, SizeEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters to provide
        context (e.g., the current phase).
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout.

        Parameters
        ----------
        index : int
            The current index of progress. Values greater than ``total`` are
            allowed and will print >100%.
        detail : str, optional
            Free-form suffix (e.g., current N). If empty, no suffix is appended.
        """
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float], label: str = "") -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        A list of numeric values to summarize. Non-finite values should be
        filtered by the caller; this function assumes finite floats.
    label : str, optional
        Optional label carried through to help downstream debugging. The value
        is not used in calculations.

    Returns
    -------
    StatsSummary
        Count, mean, median, std, min, max, 25th and 75th percentiles (q25,
        q75), and range. When ``values`` is empty, all numeric fields are
        ``None`` and ``count`` is 0 to keep CSV/plot generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    mean_val = statistics.mean(values)
    median_val = statistics.median(values)
    min_val = min(values)
    max_val = max(values)
    range_val = max_val - min_val
    std_val = statistics.pstdev(values) if n > 1 else 0

    q25 = sorted_vals[n // 4] if n >= 4 else min_val
    q75 = sorted_vals[3 * n // 4] if n >= 4 else max_val

    return {
        "count": n,
        "mean": mean_val,
        "median": median_val,
        "std": std_val,
        "min": min_val,
        "max": max_val,
        "q25": q25,
        "q75": q75,
        "range": range_val,
    }

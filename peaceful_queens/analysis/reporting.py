"""CSV export utilities for enumeration outputs (aggregates, raw runs, placements).

These helpers materialize a compact per-N summary, full per-run raw timing
data and the list of placements for one board size, for downstream analysis or
spreadsheet inspection. Filenames carry the optional suffix configured in
``settings``.
"""
from __future__ import annotations

import csv
import os
from typing import List, Sequence, Tuple

from . import settings
from .stats import EnumerationResults


def save_results_to_csv(results: EnumerationResults, n_values: List[int], out_dir: str) -> str:
    """Write one row of aggregate metrics per N and return the file path.

    Column names follow lowercase snake_case; time columns are in seconds.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_enumeration{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "solutions",
            "nodes_explored",
            "timed_out",
            "total_runs",
            "time_mean",
            "time_median",
            "time_std",
            "cpu_time_mean",
            "cpu_time_median",
            "cpu_time_std",
            "brute_force_count",
        ])

        for n in n_values:
            entry = results[n]
            time_stats = entry.get("time", {})
            cpu_stats = entry.get("cpu_time", {})
            reference = entry.get("brute_force_count")
            writer.writerow([
                n,
                entry["solutions"],
                entry["nodes"],
                int(entry.get("timed_out", False)),
                entry.get("total_runs", 0),
                time_stats.get("mean", ""),
                time_stats.get("median", ""),
                time_stats.get("std", ""),
                cpu_stats.get("mean", ""),
                cpu_stats.get("median", ""),
                cpu_stats.get("std", ""),
                "" if reference is None else reference,
            ])

    print(f"CSV saved: {filename}")
    return filename


def save_raw_runs_to_csv(results: EnumerationResults, n_values: List[int], out_dir: str) -> str:
    """Write every individual run (one row per run) and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs_enumeration{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "run_id", "solutions", "nodes_explored", "time_seconds", "cpu_time_seconds", "timeout"])
        for n in n_values:
            for run_id, run in enumerate(results[n].get("raw_runs", [])):
                writer.writerow([
                    n,
                    run_id,
                    run["solutions"],
                    run["nodes"],
                    run["time"],
                    run["cpu_time"],
                    int(run["timeout"]),
                ])

    print(f"Raw runs saved: {filename}")
    return filename


def save_solutions_to_csv(n: int, solutions: Sequence[Tuple[int, ...]], out_dir: str) -> str:
    """Write every placement for board size ``n``, one row per solution.

    Columns: ``index`` followed by ``row_0 .. row_{n-1}`` holding the column of
    the queen in that row.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"solutions_N{n}{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["index"] + [f"row_{row}" for row in range(n)])
        for index, placement in enumerate(solutions):
            writer.writerow([index] + list(placement))

    print(f"Solutions saved: {filename}")
    return filename

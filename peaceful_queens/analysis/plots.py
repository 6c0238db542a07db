"""Visualization utilities for enumeration outputs.

Overview
--------
Plotting helpers that generate PNG charts from the aggregated results produced
by ``run_enumeration_experiments``. The Agg backend is selected so charts can be
written on headless machines.

Outputs and naming
------------------
Charts are written into ``out_dir`` with a two-digit prefix for stable
ordering, followed by the optional suffix configured in ``settings``:

- 01_solutions_vs_N.png — number of solutions per board size (log scale,
    sizes with zero solutions drawn at the axis floor).
- 02_cpu_time_vs_N.png — mean CPU time per full enumeration (log scale) with
    min/max error bars across repeated runs.
- 03_nodes_vs_N.png — candidate evaluations per search (log scale).
- 04_occupancy_heatmap_N{N}.png — how many solutions place a queen on each
    square of the board for one N.
"""
from __future__ import annotations

import os
from typing import List, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from . import settings
from .stats import EnumerationResults


def _save(fname: str) -> str:
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    return fname


def occupancy_matrix(n: int, solutions: Sequence[Tuple[int, ...]]) -> np.ndarray:
    """Return an ``n x n`` array counting queens per (row, column) over ``solutions``."""
    grid = np.zeros((n, n), dtype=int)
    if solutions:
        placements = np.asarray(solutions, dtype=int)
        rows = np.tile(np.arange(n), len(placements))
        np.add.at(grid, (rows, placements.ravel()), 1)
    return grid


def plot_solution_counts(results: EnumerationResults, n_values: List[int], out_dir: str) -> str:
    """Plot the number of solutions against N."""
    os.makedirs(out_dir, exist_ok=True)
    counts = np.array([results[n]["solutions"] for n in n_values], dtype=float)

    plt.figure(figsize=(10, 6))
    plt.semilogy(n_values, np.maximum(counts, 0.5), marker="o", linewidth=2, markersize=8, label="Solutions")
    for n, count in zip(n_values, counts):
        plt.annotate(f"{int(count)}", (n, max(count, 0.5)), textcoords="offset points", xytext=(0, 6), ha="center", fontsize=9)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Solutions (log scale)", fontsize=12)
    plt.title("Peaceful Queens: Solutions vs Board Size", fontsize=14)
    plt.grid(True, alpha=0.7)
    plt.xticks(n_values)
    plt.legend(fontsize=11)

    fname = _save(os.path.join(out_dir, f"01_solutions_vs_N{settings.filename_suffix()}.png"))
    print(f"Saved solution-count chart: {fname}")
    return fname


def plot_cpu_time(results: EnumerationResults, n_values: List[int], out_dir: str) -> str:
    """Plot mean CPU time per enumeration against N, with min/max bars."""
    os.makedirs(out_dir, exist_ok=True)
    floor = 1e-6
    means = np.array([results[n]["cpu_time"].get("mean") or 0.0 for n in n_values], dtype=float)
    lows = np.array([results[n]["cpu_time"].get("min") or 0.0 for n in n_values], dtype=float)
    highs = np.array([results[n]["cpu_time"].get("max") or 0.0 for n in n_values], dtype=float)
    means = np.maximum(means, floor)
    yerr = np.vstack([means - np.maximum(lows, floor), np.maximum(highs, floor) - means])
    yerr = np.clip(yerr, 0.0, None)

    plt.figure(figsize=(10, 6))
    plt.errorbar(n_values, means, yerr=yerr, marker="s", linewidth=2, markersize=8, capsize=4, label="CPU time")
    plt.yscale("log")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("CPU time [s] (log scale)", fontsize=12)
    plt.title("Full Enumeration Cost vs Board Size", fontsize=14)
    plt.grid(True, alpha=0.7)
    plt.xticks(n_values)
    plt.legend(fontsize=11)

    fname = _save(os.path.join(out_dir, f"02_cpu_time_vs_N{settings.filename_suffix()}.png"))
    print(f"Saved CPU-time chart: {fname}")
    return fname


def plot_nodes(results: EnumerationResults, n_values: List[int], out_dir: str) -> str:
    """Plot explored nodes (candidate evaluations) against N."""
    os.makedirs(out_dir, exist_ok=True)
    nodes = np.array([max(results[n]["nodes"], 1) for n in n_values], dtype=float)

    plt.figure(figsize=(10, 6))
    plt.semilogy(n_values, nodes, marker="^", linewidth=2, markersize=8, label="Nodes explored")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Candidate evaluations (log scale)", fontsize=12)
    plt.title("Search Effort vs Board Size", fontsize=14)
    plt.grid(True, alpha=0.7)
    plt.xticks(n_values)
    plt.legend(fontsize=11)

    fname = _save(os.path.join(out_dir, f"03_nodes_vs_N{settings.filename_suffix()}.png"))
    print(f"Saved nodes chart: {fname}")
    return fname


def plot_occupancy_heatmap(n: int, solutions: Sequence[Tuple[int, ...]], out_dir: str) -> str:
    """Draw how often each square holds a queen across all solutions of ``n``."""
    os.makedirs(out_dir, exist_ok=True)
    grid = occupancy_matrix(n, solutions)

    plt.figure(figsize=(7, 6))
    plt.imshow(grid.T, cmap="Greys", origin="upper")
    plt.colorbar(label="Solutions with a queen here")
    for row in range(n):
        for column in range(n):
            plt.text(row, column, str(grid[row, column]), ha="center", va="center", fontsize=8, color="tab:red")
    plt.xlabel("Row", fontsize=12)
    plt.ylabel("Column", fontsize=12)
    plt.title(f"Queen Occupancy over {len(solutions)} Solutions (N={n})", fontsize=13)
    plt.xticks(range(n))
    plt.yticks(range(n))

    fname = _save(os.path.join(out_dir, f"04_occupancy_heatmap_N{n}{settings.filename_suffix()}.png"))
    print(f"Saved occupancy heatmap: {fname}")
    return fname


def plot_and_save(results: EnumerationResults, n_values: List[int], out_dir: str) -> List[str]:
    """Generate the standard chart set for one analysis run."""
    return [
        plot_solution_counts(results, n_values, out_dir),
        plot_cpu_time(results, n_values, out_dir),
        plot_nodes(results, n_values, out_dir),
    ]

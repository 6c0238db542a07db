"""Command-line interface and high-level pipelines for Peaceful Queens.

This module wires together configuration loading, single-board searches with
console/SVG output, and batch enumeration with CSV export and charts. It
isolates I/O, argument parsing, and progress reporting from the search engine
so that the rest of the codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from . import settings
from .experiments import (
    collect_solutions,
    counts_by_size,
    run_enumeration_experiments,
)
from .reporting import (
    save_raw_runs_to_csv,
    save_results_to_csv,
    save_solutions_to_csv,
)
from config_manager import ConfigManager
from peaceful_queens.backtracking import QueenSearch
from peaceful_queens.sinks import (
    CollectingSink,
    ConsolePrintSink,
    CountingSink,
    SolutionSink,
    SvgExportSink,
    TeeSink,
)
from peaceful_queens.svg import solution_file_name
from peaceful_queens.timing import format_cpu_time
from peaceful_queens.utils import brute_force_count, is_valid_solution


# ------------- Utils --------------------------------------------------------

def parse_board_sizes(size_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize board size CLI inputs into a sorted list of unique ints.

    Accepts repeated flags (``-n 4 -n 5``), comma-separated lists (``-n 4,5``)
    and inclusive ranges (``-n 4-8``). Returns ``None`` when nothing is given
    so callers fall back to the configured default set.
    """
    if not size_args:
        return None
    sizes: List[int] = []
    for entry in size_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                if "-" in token:
                    low, high = (int(part) for part in token.split("-", 1))
                    sizes.extend(range(low, high + 1))
                else:
                    sizes.append(int(token))
            except ValueError as exc:
                raise ValueError(f"Invalid board size '{token}'") from exc
    invalid = [n for n in sizes if n < 1]
    if invalid:
        raise ValueError("Board sizes must be >= 1, got: " + ", ".join(str(n) for n in invalid))
    return sorted(set(sizes)) or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings`` in-place."""
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        try:
            settings.BOARD_SIZES = [int(n) for n in experiment_settings.get("board_sizes", settings.BOARD_SIZES)]
            settings.RUNS_PER_SIZE = int(experiment_settings.get("runs_per_size", settings.RUNS_PER_SIZE))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid experiment_settings: {exc}") from exc
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)
        if any(n < 1 for n in settings.BOARD_SIZES):
            raise ValueError("board_sizes must only contain values >= 1")
        if settings.RUNS_PER_SIZE < 1:
            raise ValueError("runs_per_size must be >= 1")

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        limit = timeout_settings.get("search_time_limit", settings.SEARCH_TIME_LIMIT)
        settings.set_time_limit(None if limit is None else float(limit))

    export_settings = config_mgr.get_export_settings()
    if export_settings:
        settings.PRINT_SOLUTIONS = bool(export_settings.get("print_solutions", settings.PRINT_SOLUTIONS))
        settings.EXPORT_SVG = bool(export_settings.get("export_svg", settings.EXPORT_SVG))
        settings.SVG_DIR = export_settings.get("svg_dir", settings.SVG_DIR)
        settings.SVG_SQUARE_SIZE = int(export_settings.get("svg_square_size", settings.SVG_SQUARE_SIZE))
        if settings.SVG_SQUARE_SIZE <= 0:
            raise ValueError("svg_square_size must be positive")

    return config_mgr


def save_export_settings(
    config_mgr: ConfigManager,
    print_solutions: bool,
    export_svg: bool,
    svg_dir: str,
    square: int,
) -> None:
    """Persist the export options of a ``solve`` run into the config file."""
    config_mgr.update_setting("export_settings", "print_solutions", print_solutions)
    config_mgr.update_setting("export_settings", "export_svg", export_svg)
    config_mgr.update_setting("export_settings", "svg_dir", svg_dir)
    config_mgr.update_setting("export_settings", "svg_square_size", square)


# ------------- Pipeline: single board --------------------------------------

def main_solve(
    n: int,
    print_solutions: bool = True,
    export_svg: bool = False,
    svg_dir: str = "svg",
    square: int = 32,
    time_limit: Optional[float] = None,
) -> int:
    """Enumerate one board size, reporting solutions as configured.

    Returns the number of solutions found.
    """
    sinks: List[SolutionSink] = []
    if print_solutions:
        sinks.append(ConsolePrintSink())
    svg_sink = None
    if export_svg:
        svg_sink = SvgExportSink(svg_dir, square)
        sinks.append(svg_sink)
    sink: SolutionSink = TeeSink(*sinks) if sinks else CountingSink()

    result = QueenSearch(n).run(sink, time_limit=time_limit)

    print()
    print(f"{result.solutions} solutions found")
    if result.timed_out:
        print(f"Search stopped after {time_limit}s; the count is partial.")
    if svg_sink is not None:
        print(f"SVG files written: {len(set(svg_sink.paths))} in {svg_sink.out_dir}")
    print(f"CPU time: {format_cpu_time(result.cpu_time)} ({result.nodes} nodes)")
    return result.solutions


# ------------- Pipeline: batch analysis ------------------------------------

def main_analyze(
    n_values: Optional[List[int]] = None,
    runs: Optional[int] = None,
    out_dir: Optional[str] = None,
    plots: bool = True,
    validate: bool = False,
    config_mgr: Optional[ConfigManager] = None,
) -> None:
    """Enumerate every configured board size, export CSVs and charts."""
    sizes = n_values or settings.BOARD_SIZES
    runs = runs or settings.RUNS_PER_SIZE
    out_dir = out_dir or settings.OUT_DIR
    os.makedirs(out_dir, exist_ok=True)

    print("\n============================================")
    print(f"ENUMERATION FOR N = {', '.join(str(n) for n in sizes)} ({runs} runs each)")
    print("============================================")

    results = run_enumeration_experiments(
        sizes,
        runs=runs,
        time_limit=settings.SEARCH_TIME_LIMIT,
        validate=validate,
        progress_label="Enumerate",
        known_counts=config_mgr.get_known_counts() if config_mgr is not None else None,
    )

    save_results_to_csv(results, sizes, out_dir)
    save_raw_runs_to_csv(results, sizes, out_dir)

    # Keep the heatmap input small: the largest completed N with solutions.
    heatmap_n = None
    for n in sizes:
        if not results[n]["timed_out"] and results[n]["solutions"] > 0 and n <= 10:
            heatmap_n = n
    solutions = collect_solutions(heatmap_n) if heatmap_n is not None else []
    if heatmap_n is not None:
        save_solutions_to_csv(heatmap_n, solutions, out_dir)

    if plots:
        from .plots import plot_and_save, plot_occupancy_heatmap

        plot_and_save(results, sizes, out_dir)
        if heatmap_n is not None:
            plot_occupancy_heatmap(heatmap_n, solutions, out_dir)

    if config_mgr is not None:
        config_mgr.save_known_counts(counts_by_size(results))

    print("\nAnalysis pipeline completed.")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of the whole toolchain.

    Verifies that:
    - Search counts for N=1..6 match brute-force enumeration.
    - Every placement is valid and the working buffers are restored.
    - SVG export and the CSV pipeline write non-empty files.
    """
    print("Running quick regression tests (N=1..6)...")

    for n in range(1, 7):
        engine = QueenSearch(n)
        sink = CollectingSink()
        result = engine.run(sink)
        expected = brute_force_count(n)
        if result.solutions != expected:
            raise AssertionError(f"N={n}: search found {result.solutions} solutions, brute force {expected}.")
        if len(set(sink.solutions)) != len(sink.solutions):
            raise AssertionError(f"N={n}: duplicate placements reported.")
        for placement in sink.solutions:
            if not is_valid_solution(placement):
                raise AssertionError(f"N={n}: invalid placement {placement}.")
        if not engine.is_reset():
            raise AssertionError(f"N={n}: working buffers not restored after search.")
        print(f"  N={n}: {result.solutions} solutions, nodes={result.nodes}")

    with tempfile.TemporaryDirectory() as tmpdir:
        svg_sink = SvgExportSink(tmpdir)
        QueenSearch(4).run(svg_sink)
        for path in svg_sink.paths:
            if not path.exists() or path.stat().st_size == 0:
                raise AssertionError(f"SVG file was not written: {path}")
        if sorted(p.name for p in svg_sink.paths) != sorted(solution_file_name(s) for s in collect_solutions(4)):
            raise AssertionError("SVG file names do not match the placements.")

        results = run_enumeration_experiments([4, 5], runs=1, validate=True)
        csv_path = Path(save_results_to_csv(results, [4, 5], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Enumerate solutions to the Peaceful Queens problem.")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file (e.g. config.json).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    subparsers = parser.add_subparsers(dest="command")

    solve = subparsers.add_parser("solve", help="Enumerate one board size, printing and/or exporting solutions.")
    solve.add_argument("n", type=int, help="Width and height of the chessboard in squares.")
    solve.add_argument(
        "--print",
        dest="print_solutions",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print each solution to the console (default: on).",
    )
    solve.add_argument("--svg", action="store_true", default=None, help="Write one SVG file per solution.")
    solve.add_argument("--svg-dir", default=None, help="Directory for SVG files (default: svg).")
    solve.add_argument("--square", type=int, default=None, help="Square width in pixels for SVG output (default: 32).")
    solve.add_argument("--time-limit", type=float, default=None, help="Stop the search after this many seconds.")
    solve.add_argument(
        "--save-config",
        action="store_true",
        help="Store the export options of this run in the file given by --config.",
    )

    analyze = subparsers.add_parser("analyze", help="Enumerate a range of board sizes and export CSVs/charts.")
    analyze.add_argument(
        "--sizes",
        "-n",
        action="append",
        help="Board sizes to enumerate (comma-separated, ranges like 4-8, or multiple flags).",
    )
    analyze.add_argument("--runs", type=int, default=None, help="Timing runs per board size.")
    analyze.add_argument("--out", default=None, help="Output directory for CSV files and charts.")
    analyze.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    analyze.add_argument("--validate", action="store_true", help="Validate every placement and cross-check counts with brute force or stored counts.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    if args.command is None:
        parser.print_help()
        raise SystemExit(1)

    config_mgr = None
    if args.config:
        try:
            config_mgr = apply_configuration(args.config)
        except FileNotFoundError as exc:
            print(f"Configuration file not found: {exc}")
            raise SystemExit(1) from exc
        except ValueError as exc:
            print(f"Configuration error: {exc}")
            raise SystemExit(1) from exc

    try:
        if args.command == "solve":
            if args.square is not None and args.square <= 0:
                raise ValueError("--square must be positive")
            if args.save_config and config_mgr is None:
                raise ValueError("--save-config requires --config")
            print_solutions = settings.PRINT_SOLUTIONS if args.print_solutions is None else args.print_solutions
            export_svg = settings.EXPORT_SVG if args.svg is None else args.svg
            svg_dir = args.svg_dir or settings.SVG_DIR
            square = args.square or settings.SVG_SQUARE_SIZE
            main_solve(
                args.n,
                print_solutions=print_solutions,
                export_svg=export_svg,
                svg_dir=svg_dir,
                square=square,
                time_limit=settings.SEARCH_TIME_LIMIT if args.time_limit is None else args.time_limit,
            )
            if args.save_config:
                save_export_settings(config_mgr, print_solutions, export_svg, svg_dir, square)
        else:
            if args.runs is not None and args.runs < 1:
                raise ValueError("--runs must be >= 1")
            main_analyze(
                n_values=parse_board_sizes(args.sizes),
                runs=args.runs,
                out_dir=args.out,
                plots=not args.no_plots,
                validate=args.validate,
                config_mgr=config_mgr,
            )
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except (TypeError, ValueError) as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc

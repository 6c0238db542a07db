"""Peaceful Queens enumeration."""

from .backtracking import QueenSearch, SearchResult, search, validate_size
from .sinks import (
    CollectingSink,
    ConsolePrintSink,
    CountingSink,
    SolutionSink,
    SvgExportSink,
    TeeSink,
)
from .svg import export_svg, render_svg, solution_file_name
from .timing import CpuTimer, cpu_time, format_cpu_time
from .utils import (
    brute_force_count,
    brute_force_solutions,
    conflicts,
    conflicts_on2,
    is_permutation,
    is_valid_solution,
)

__all__ = [
    "QueenSearch",
    "SearchResult",
    "search",
    "validate_size",
    "SolutionSink",
    "CountingSink",
    "CollectingSink",
    "ConsolePrintSink",
    "SvgExportSink",
    "TeeSink",
    "render_svg",
    "export_svg",
    "solution_file_name",
    "cpu_time",
    "format_cpu_time",
    "CpuTimer",
    "conflicts",
    "conflicts_on2",
    "is_permutation",
    "is_valid_solution",
    "brute_force_solutions",
    "brute_force_count",
]

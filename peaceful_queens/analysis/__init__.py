"""
Analysis and orchestration package for Peaceful Queens enumeration.

This package contains:
- settings: global knobs and the search time limit
- stats: typed summaries and aggregation helpers
- experiments: batch enumeration runners with result shaping
- reporting: CSV exports and raw-data writers
- plots: chart utilities (imported lazily by the CLI)
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    SizeEntry,
    EnumerationResults,
    compute_detailed_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "SizeEntry",
    "EnumerationResults",
    # utils
    "compute_detailed_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]

"""Global settings for the Peaceful Queens analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`peaceful_queens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

# Board sizes to enumerate (in ascending order) for scalability analysis
BOARD_SIZES: List[int] = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

# Repeated timing runs per board size; counts are deterministic, times are not
RUNS_PER_SIZE: int = 3

# Wall-clock limit for one search in seconds (None = no limit)
SEARCH_TIME_LIMIT: Optional[float] = None

# Output directory for CSV and charts
OUT_DIR: str = "results_peaceful_queens"

# `solve` command defaults
PRINT_SOLUTIONS: bool = True
EXPORT_SVG: bool = False
SVG_DIR: str = "svg"
SVG_SQUARE_SIZE: int = 32

# Largest N for which brute-force cross-checks are affordable (8! = 40320)
BRUTE_FORCE_MAX_N: int = 8

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_time_limit(search_time_limit: Optional[float] = None) -> None:
    """Configure the wall-clock limit applied to every search.

    Side effects
    - Updates the module-level global and prints the active limit so it is
      explicit at run start.
    """
    global SEARCH_TIME_LIMIT
    SEARCH_TIME_LIMIT = search_time_limit
    print(f"Search time limit: {SEARCH_TIME_LIMIT}s" if SEARCH_TIME_LIMIT else "Search time limit: unlimited")


def filename_suffix() -> str:
    """Return the ``_<tag>_<run id>`` suffix enabled by the naming policy."""
    parts: List[str] = []
    if RUN_TAG:
        parts.append(str(RUN_TAG))
    if DATE_IN_FILENAMES and RUN_ID:
        parts.append(str(RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""

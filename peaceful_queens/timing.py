"""CPU timing helpers.

Wall-clock time (``perf_counter``) is noisy when other processes compete for
the machine; process CPU time is the figure reported next to solution counts.
"""

from __future__ import annotations

from time import process_time
from typing import Optional


def cpu_time() -> float:
    """Return the CPU time consumed by the current process, in seconds."""
    return process_time()


def format_cpu_time(seconds: float) -> str:
    """Render a duration as ``"0.012s"`` or ``"1m 05.2s"``."""
    if round(seconds, 3) < 60:
        return f"{seconds:.3f}s"
    minutes, rest = divmod(round(seconds, 1), 60)
    return f"{int(minutes)}m {rest:04.1f}s"


class CpuTimer:
    """Context manager measuring CPU seconds spent inside the ``with`` block."""

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed: float = 0.0

    def __enter__(self) -> "CpuTimer":
        self._start = cpu_time()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._start is not None:
            self.elapsed = cpu_time() - self._start

"""Backtracking enumeration of all Peaceful Queens placements.

This module implements the exhaustive recursive search for the Peaceful Queens
problem and provides two entry points:

- search(size, sink): enumerate every solution, hand each one to ``sink`` and
    return the number of solutions found.
- QueenSearch(size).run(sink, time_limit=None): the same search on an engine
    object that owns its buffers and reports a ``SearchResult`` with node count,
    timing information and an optional cooperative time limit.

`placement` tuples passed to sinks have length `size` where `placement[row] =
column` places a queen at (row, column).

Implementation overview
-----------------------
- State representation: a working permutation `A` of the columns. Rows are
    filled from `size - 1` down to `0`; while row `m` is being filled, `A[0..m]`
    is the pool of unplaced columns and `A[m+1..size)` is the settled part.
    Row and column uniqueness hold by construction.
- Constraint tracking: two boolean arrays give O(1) diagonal checks:
    `back_free[column - row + offset]` and `diag_free[column + row]`, where
    `offset = size - 1` maps negative indices to [0..]. `True` means free.
- Search strategy: depth-first recursion over the call stack (depth <= size).
    Each candidate is swapped into the frontier slot, marked, recursed on,
    unmarked and swapped back (try, recurse, undo).

Contract (public API)
---------------------
- Input: integer `size >= 1`; anything else is rejected before any buffer is
    allocated (`ValueError` for sizes < 1, `TypeError` for non-integers).
- Output: the number of sink invocations; sinks receive zero-based running
    indices in enumeration order.
- Determinism: candidates are tried in pool order, so two runs produce the same
    placements in the same order.
- Sink errors propagate unchanged; the working buffers are still restored.
- Nodes explored semantics: incremented every time a pool entry is tested as a
    candidate for a row (even if rejected by the diagonal masks).
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from time import perf_counter
from typing import TYPE_CHECKING, List, Optional, Tuple

from .timing import cpu_time

if TYPE_CHECKING:
    from .sinks import SolutionSink


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one complete (or time-limited) enumeration."""

    size: int
    solutions: int
    nodes: int
    elapsed: float
    cpu_time: float
    timed_out: bool = False


def validate_size(size: int) -> int:
    """Return ``size`` if it is a usable board size, raise otherwise."""
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise TypeError(f"Board size must be an integer, got {type(size).__name__}")
    if size < 1:
        raise ValueError(f"Board size must be >= 1, got {size}")
    return int(size)


class QueenSearch:
    """Search engine owning the permutation and diagonal occupancy buffers.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 1). Fixed for the lifetime of the engine.

    Notes
    -----
    The occupancy arrays are derived from the settled part of the permutation:
    between two sink calls they are `False` exactly at the diagonals occupied by
    settled queens. Only the engine's own call chain touches the buffers.
    """

    def __init__(self, size: int):
        size = self.size = validate_size(size)
        self._offset = size - 1
        self._columns: List[int] = list(range(size))
        self._back_free: List[bool] = [True] * (2 * size - 1)
        self._diag_free: List[bool] = [True] * (2 * size - 1)
        self._sink: Optional[SolutionSink] = None
        self._count = 0
        self._nodes = 0
        self._deadline: Optional[float] = None
        self._timed_out = False

    @property
    def permutation(self) -> Tuple[int, ...]:
        """Snapshot of the working permutation."""
        return tuple(self._columns)

    def is_reset(self) -> bool:
        """Return True when the buffers are back in their initial state."""
        return (
            self._columns == list(range(self.size))
            and all(self._back_free)
            and all(self._diag_free)
        )

    def run(self, sink: SolutionSink, time_limit: Optional[float] = None) -> SearchResult:
        """Enumerate every solution and report each one to ``sink``.

        Parameters
        ----------
        sink : SolutionSink
            Receives ``accept(placement, size, index)`` once per solution.
        time_limit : float | None
            Optional wall-clock limit in seconds. When exceeded the search
            stops trying new candidates and returns the partial count with
            ``timed_out=True``.

        Returns
        -------
        SearchResult
            Solution count, explored nodes, wall and CPU time.
        """
        self._sink = sink
        self._count = 0
        self._nodes = 0
        self._timed_out = False

        start = perf_counter()
        cpu_start = cpu_time()
        self._deadline = None if time_limit is None else start + time_limit
        try:
            self._place(self.size - 1)
        finally:
            self._sink = None
            self._deadline = None

        return SearchResult(
            size=self.size,
            solutions=self._count,
            nodes=self._nodes,
            elapsed=perf_counter() - start,
            cpu_time=cpu_time() - cpu_start,
            timed_out=self._timed_out,
        )

    def _place(self, row: int) -> None:
        """Fill ``row`` with every safe column from the pool ``A[0..row]``."""
        columns = self._columns
        if row < 0:
            # Hand out a copy: the live list keeps changing once we return.
            self._sink.accept(tuple(columns), self.size, self._count)
            self._count += 1
            return

        for i in range(row, -1, -1):
            if self._deadline is not None and perf_counter() > self._deadline:
                self._timed_out = True
                return

            self._nodes += 1
            column = columns[i]
            back = column - row + self._offset
            diag = column + row
            if not (self._back_free[back] and self._diag_free[diag]):
                continue

            columns[row], columns[i] = columns[i], columns[row]
            self._back_free[back] = self._diag_free[diag] = False
            try:
                self._place(row - 1)
            finally:
                self._back_free[back] = self._diag_free[diag] = True
                columns[row], columns[i] = columns[i], columns[row]

            if self._timed_out:
                return


def search(size: int, sink: SolutionSink) -> int:
    """Enumerate all Peaceful Queens placements of ``size`` and return the count.

    Each solution is passed to ``sink.accept(placement, size, index)`` with a
    zero-based running ``index``; the return value equals the number of calls.
    """
    return QueenSearch(size).run(sink).solutions

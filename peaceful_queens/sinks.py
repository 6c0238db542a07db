"""Solution sinks: the collaborators that consume enumerated placements.

The search engine calls ``accept(placement, size, index)`` once per solution,
synchronously and in enumeration order. ``placement`` is a tuple snapshot, so
sinks may keep it; they must not rely on the engine's internal list.

Anything raised inside ``accept`` propagates out of the search and abandons it.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, TextIO, Tuple, Union

from .svg import DEFAULT_SQUARE_SIZE, export_svg


class SolutionSink(Protocol):
    """Capability consumed by :class:`peaceful_queens.backtracking.QueenSearch`."""

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        ...


class CountingSink:
    """Count solutions without keeping them."""

    def __init__(self) -> None:
        self.count = 0

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        self.count += 1


class CollectingSink:
    """Keep every placement, in enumeration order."""

    def __init__(self) -> None:
        self.solutions: List[Tuple[int, ...]] = []
        self.indices: List[int] = []

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        self.solutions.append(tuple(placement))
        self.indices.append(index)

    def __len__(self) -> int:
        return len(self.solutions)


class ConsolePrintSink:
    """Print each placement as space-separated column indices, one per line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(" ".join(str(column) for column in placement), file=stream)


class SvgExportSink:
    """Write one SVG file per solution into ``out_dir``.

    Parameters
    ----------
    out_dir : str | os.PathLike
        Destination directory, created on first use.
    square : int
        Width of a board square in pixels.
    """

    def __init__(self, out_dir: Union[str, os.PathLike] = ".", square: int = DEFAULT_SQUARE_SIZE):
        self.out_dir = Path(out_dir)
        self.square = square
        self.paths: List[Path] = []

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        self.paths.append(export_svg(placement, self.out_dir, self.square))


class TeeSink:
    """Forward every solution to several sinks, in the given order."""

    def __init__(self, *sinks: SolutionSink):
        self.sinks = list(sinks)

    def accept(self, placement: Sequence[int], size: int, index: int) -> None:
        for sink in self.sinks:
            sink.accept(placement, size, index)

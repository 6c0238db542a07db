"""SVG rendering of Peaceful Queens placements.

Each document shows an ``n x n`` checkerboard (outline plus filled squares on
odd ``row + column`` parity) and one grey circle per queen. Queens are drawn at
grid position ``(row, placement[row])``: the row selects the x offset and the
column the y offset.

Layout
------
- square width ``w`` (default 32 px), canvas ``w * (n + 1)`` on each side
- ``viewBox`` starts at ``-4 -4`` so the outline stroke is not clipped
- circle radius ``round(0.35 * w)`` set through the embedded stylesheet
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence, Union

DEFAULT_SQUARE_SIZE = 32
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def solution_file_name(placement: Sequence[int]) -> str:
    """Concatenate the column indices into a file name, e.g. ``1302.svg``.

    Boards wider than 10 have two-digit columns, so their indices are joined
    with ``-`` to keep names unique (``1-10-...`` vs ``11-0-...``).
    """
    separator = "-" if len(placement) > 10 else ""
    return separator.join(str(column) for column in placement) + ".svg"


def _header(width: int) -> List[str]:
    return [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{width}" height="{width}" viewBox="-4 -4 {width} {width}" xmlns="{SVG_NAMESPACE}">',
    ]


def _style(radius: int) -> List[str]:
    return [
        "<style>",
        f"circle{{stroke:black;stroke-width:1;fill:darkgray;r:{radius}}}",
        "</style>",
    ]


def _chessboard(square: int, size: int) -> List[str]:
    side = square * size
    lines = [f'<rect width="{side}" height="{side}" fill="none" stroke="black" stroke-width="1"/>']
    for i in range(size):
        for j in range(size):
            if (i + j) % 2 == 1:
                lines.append(
                    f'<rect x="{i * square}" y="{j * square}" width="{square}" height="{square}"/>'
                )
    return lines


def _queens(placement: Sequence[int], square: int) -> List[str]:
    delta = square // 2
    return [
        f'<circle cx="{row * square + delta}" cy="{column * square + delta}"/>'
        for row, column in enumerate(placement)
    ]


def render_svg(placement: Sequence[int], square: int = DEFAULT_SQUARE_SIZE) -> str:
    """Return the SVG document for ``placement`` as a string.

    Parameters
    ----------
    placement : Sequence[int]
        ``placement[row] = column`` for every row of the board.
    square : int
        Width and height of one board square in pixels (must be positive).
    """
    if square <= 0:
        raise ValueError(f"Square size must be positive, got {square}")
    size = len(placement)
    lines = _header(square * (size + 1))
    lines += _style(int(round(0.35 * square)))
    lines += _chessboard(square, size)
    lines += _queens(placement, square)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(
    placement: Sequence[int],
    out_dir: Union[str, os.PathLike] = ".",
    square: int = DEFAULT_SQUARE_SIZE,
) -> Path:
    """Write ``placement`` as an SVG file into ``out_dir`` and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    path = Path(out_dir) / solution_file_name(placement)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_svg(placement, square))
    return path

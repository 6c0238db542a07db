"""Validation helpers for Peaceful Queens placements.

Independent of the search engine: these checks look at a finished placement
from scratch, so they can be used to verify what the engine produces and to
build a brute-force reference enumeration for small boards.

Representation
--------------
Placements are encoded as a 1D sequence where ``placement[row] = column``.
"""

from __future__ import annotations

from collections import Counter
from itertools import permutations
from typing import Iterator, List, Sequence, Tuple


def conflicts(placement: Sequence[int]) -> int:
    """Compute the number of attacking queen pairs in O(N).

    Counts queens per column, diagonal and anti-diagonal with hash maps; rows
    are unique by representation.
    """
    columns: Counter[int] = Counter()
    diag: Counter[int] = Counter()
    anti_diag: Counter[int] = Counter()

    for row, column in enumerate(placement):
        columns[column] += 1
        diag[column - row] += 1
        anti_diag[column + row] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(columns) + _pairs(diag) + _pairs(anti_diag)


def conflicts_on2(placement: Sequence[int]) -> int:
    """Compute the number of attacking queen pairs in O(N^2).

    Reference implementation used to cross-check ``conflicts``.
    """
    n = len(placement)
    total = 0
    for i in range(n):
        for j in range(i + 1, n):
            if placement[i] == placement[j] or abs(placement[i] - placement[j]) == abs(i - j):
                total += 1
    return total


def is_permutation(placement: Sequence[int]) -> bool:
    """Return True if ``placement`` is a permutation of ``0..len-1``."""
    return sorted(placement) == list(range(len(placement)))


def is_peaceful(placement: Sequence[int]) -> bool:
    """Return True if no two queens share a diagonal or an anti-diagonal."""
    n = len(placement)
    for i in range(n):
        for j in range(i + 1, n):
            if abs(placement[i] - placement[j]) == j - i:
                return False
    return True


def is_valid_solution(placement: Sequence[int]) -> bool:
    """Return True if ``placement`` is a complete Peaceful Queens solution.

    Contract
    - Input: sequence of length N where placement[row] = column (0-based)
    - Valid if: every entry is an int, the entries form a permutation and no
      pair of queens attacks along a diagonal
    """
    if len(placement) == 0:
        return False
    for column in placement:
        if isinstance(column, bool) or not isinstance(column, int):
            return False
    return is_permutation(placement) and conflicts(placement) == 0


def iter_brute_force_solutions(size: int) -> Iterator[Tuple[int, ...]]:
    """Yield every valid placement by filtering all ``size!`` permutations."""
    for candidate in permutations(range(size)):
        if is_peaceful(candidate):
            yield candidate


def brute_force_solutions(size: int) -> List[Tuple[int, ...]]:
    """Return all valid placements of ``size`` in lexicographic order."""
    return list(iter_brute_force_solutions(size))


def brute_force_count(size: int) -> int:
    """Count valid placements of ``size`` by exhaustive enumeration."""
    return sum(1 for _ in iter_brute_force_solutions(size))

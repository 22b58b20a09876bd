"""Row, column and box constraint check for a single placement."""

from __future__ import annotations

from typing import Sequence

from .grid import BOX, SIZE


def is_valid(grid: Sequence[Sequence[int]], row: int, col: int, digit: int) -> bool:
    """Return ``True`` if ``digit`` occurs in neither the row, column nor box of ``(row, col)``.

    The target cell itself is not special-cased: asking whether a cell may
    hold the value it already holds answers ``False``.
    """

    if any(grid[row][j] == digit for j in range(SIZE)):
        return False
    if any(grid[i][col] == digit for i in range(SIZE)):
        return False
    br = row - row % BOX
    bc = col - col % BOX
    for i in range(br, br + BOX):
        for j in range(bc, bc + BOX):
            if grid[i][j] == digit:
                return False
    return True


def has_conflicts(grid: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` when two filled cells share a digit in a row, column or box."""

    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            if v == 0:
                continue
            if any(grid[r][j] == v for j in range(SIZE) if j != c):
                return True
            if any(grid[i][c] == v for i in range(SIZE) if i != r):
                return True
            br, bc = r - r % BOX, c - c % BOX
            for i in range(br, br + BOX):
                for j in range(bc, bc + BOX):
                    if (i, j) != (r, c) and grid[i][j] == v:
                        return True
    return False


__all__ = ["has_conflicts", "is_valid"]

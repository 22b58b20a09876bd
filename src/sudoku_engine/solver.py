"""Randomized depth-first backtracking over a mutable grid.

Both routines place a candidate, recurse and undo the placement on failure,
so the grid they are handed is left exactly as it was whenever they report
failure (``solve``) or return at all (``count_solutions``). ``solve`` fills
the first empty cell in row-major order; ``count_solutions`` branches on the
empty cell with the fewest candidates.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from .grid import EMPTY, SIZE, Grid
from .validity import is_valid

DIGITS = tuple(range(1, SIZE + 1))


def find_empty(grid: Grid) -> Optional[Tuple[int, int]]:
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == EMPTY:
                return r, c
    return None


def solve(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """Complete ``grid`` in place; return ``False`` if no completion exists.

    Candidates at every branch point are shuffled with ``rng`` (a fresh
    :class:`random.Random` when omitted), which is what makes repeated solves
    from an empty grid produce different grids.
    """

    if rng is None:
        rng = random.Random()
    return _fill(grid, rng)


def _fill(grid: Grid, rng: random.Random) -> bool:
    empty = find_empty(grid)
    if empty is None:
        return True
    r, c = empty
    candidates: List[int] = list(DIGITS)
    rng.shuffle(candidates)
    for d in candidates:
        if is_valid(grid, r, c, d):
            grid[r][c] = d
            if _fill(grid, rng):
                return True
            grid[r][c] = EMPTY
    return False


def _box(r: int, c: int) -> int:
    return (r // 3) * 3 + c // 3


def count_solutions(grid: Grid, cap: int = 2) -> int:
    """Count completions of ``grid``, stopping once ``cap`` have been found.

    With the default cap the answer distinguishes "none", "exactly one" and
    "two or more" without enumerating every solution of a sparse grid.
    """

    if cap < 1:
        raise ValueError("cap must be at least 1")

    # digit d is bit d of each mask
    full = sum(1 << d for d in DIGITS)
    row_mask = [0] * SIZE
    col_mask = [0] * SIZE
    box_mask = [0] * SIZE
    empties: List[Tuple[int, int]] = []
    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            if v == EMPTY:
                empties.append((r, c))
            else:
                row_mask[r] |= 1 << v
                col_mask[c] |= 1 << v
                box_mask[_box(r, c)] |= 1 << v

    count = 0

    def select_cell() -> Optional[Tuple[int, int, int]]:
        best = None
        best_count = SIZE + 1
        for r, c in empties:
            if grid[r][c] != EMPTY:
                continue
            m = full & ~(row_mask[r] | col_mask[c] | box_mask[_box(r, c)])
            k = m.bit_count()
            if k < best_count:
                best = (r, c, m)
                best_count = k
                if k <= 1:
                    break
        return best

    def backtrack() -> bool:
        nonlocal count
        cell = select_cell()
        if cell is None:
            count += 1
            return count >= cap
        r, c, m = cell
        b = _box(r, c)
        for d in DIGITS:
            bit = 1 << d
            if not m & bit:
                continue
            grid[r][c] = d
            row_mask[r] |= bit
            col_mask[c] |= bit
            box_mask[b] |= bit
            stop = backtrack()
            grid[r][c] = EMPTY
            row_mask[r] &= ~bit
            col_mask[c] &= ~bit
            box_mask[b] &= ~bit
            if stop:
                return True
        return False

    backtrack()
    return count


__all__ = ["count_solutions", "find_empty", "solve"]

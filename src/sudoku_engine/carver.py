"""Difficulty policy and cell removal."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from .errors import UnsupportedDifficultyError
from .grid import CELLS, EMPTY, Grid, copy_grid, ensure_grid, positions
from .solver import DIGITS, count_solutions
from .validity import is_valid

_LOGGER = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        """Return the member for ``value``; unknown tags raise instead of defaulting."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedDifficultyError(value)


# Closed ranges of clues (filled cells) kept in the carved puzzle.
CLUE_RANGES: Dict[Difficulty, Tuple[int, int]] = {
    Difficulty.EASY: (38, 40),
    Difficulty.MEDIUM: (32, 34),
    Difficulty.HARD: (27, 29),
    Difficulty.EXPERT: (22, 24),
}


def clue_range(difficulty: "Difficulty | str") -> Tuple[int, int]:
    return CLUE_RANGES[Difficulty.parse(difficulty)]


def clue_count(difficulty: "Difficulty | str", rng: Optional[random.Random] = None) -> int:
    """Pick a clue count uniformly inside the difficulty's closed range."""

    low, high = clue_range(difficulty)
    if rng is None:
        rng = random.Random()
    return rng.randint(low, high)


def _admits_other_digit(puzzle: Grid, row: int, col: int, digit: int) -> bool:
    """Return ``True`` if the cleared cell ``(row, col)`` can hold a digit other than ``digit``.

    The puzzle had exactly one solution before the cell was cleared, so it
    still has exactly one unless another digit at that cell completes the grid.
    """

    for other in DIGITS:
        if other == digit or not is_valid(puzzle, row, col, other):
            continue
        puzzle[row][col] = other
        found = count_solutions(puzzle, 1) > 0
        puzzle[row][col] = EMPTY
        if found:
            return True
    return False


def carve(
    solution: Sequence[Sequence[int]],
    difficulty: "Difficulty | str",
    rng: Optional[random.Random] = None,
    *,
    unique: bool = False,
) -> Grid:
    """Zero cells of a copy of ``solution`` down to the difficulty's clue count.

    Positions are visited in a shuffled order. By default removed cells are
    not re-checked, so the result may admit more than one completion. With
    ``unique=True`` a removal is undone whenever the puzzle stops having
    exactly one solution; the clue count can then end above the range.
    """

    ensure_grid(solution, name="solution")
    level = Difficulty.parse(difficulty)
    if rng is None:
        rng = random.Random()

    puzzle = copy_grid(solution)
    cells_to_remove = CELLS - clue_count(level, rng)
    cells = positions()
    rng.shuffle(cells)

    removed = 0
    restored = 0
    for r, c in cells:
        if removed >= cells_to_remove:
            break
        saved = puzzle[r][c]
        puzzle[r][c] = EMPTY
        if unique and _admits_other_digit(puzzle, r, c, saved):
            puzzle[r][c] = saved
            restored += 1
            continue
        removed += 1

    _LOGGER.debug(
        "carved %s puzzle: removed=%d target=%d restored=%d",
        level.value,
        removed,
        cells_to_remove,
        restored,
    )
    return puzzle


__all__ = ["CLUE_RANGES", "Difficulty", "carve", "clue_count", "clue_range"]

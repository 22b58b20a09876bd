"""Public entry points: generate, validate and check moves."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from .carver import Difficulty, carve
from .generator import generate_solved_grid
from .grid import Grid, copy_grid, count_clues, ensure_cell, ensure_grid
from .solver import solve
from .validity import has_conflicts

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleResult:
    """A carved puzzle and the solved grid it was carved from.

    Both grids are allocated per call; callers may mutate them freely.
    """

    puzzle: Grid
    solution: Grid


def _make_rng(rng: Optional[random.Random], seed: Optional[int | str]) -> random.Random:
    if rng is not None and seed is not None:
        raise ValueError("pass either rng or seed, not both")
    if rng is not None:
        return rng
    return random.Random(seed)


def generate_sudoku(
    difficulty: "Difficulty | str" = Difficulty.MEDIUM,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int | str] = None,
    unique: bool = False,
) -> PuzzleResult:
    """Generate a solved grid and carve a puzzle of the requested difficulty.

    Identical ``seed`` values reproduce the same pair. ``unique`` switches the
    carver to its strict mode (see :func:`sudoku_engine.carver.carve`).
    """

    level = Difficulty.parse(difficulty)
    generator = _make_rng(rng, seed)
    solution = generate_solved_grid(generator)
    puzzle = carve(solution, level, generator, unique=unique)
    _LOGGER.debug("generated %s puzzle with %d clues", level.value, count_clues(puzzle))
    return PuzzleResult(puzzle=puzzle, solution=solution)


def validate_puzzle(puzzle: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` if the puzzle's clues admit at least one completion."""

    ensure_grid(puzzle, name="puzzle")
    if has_conflicts(puzzle):
        return False
    return solve(copy_grid(puzzle))


def check_move(solution: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Return whether ``value`` is the solution's digit at ``(row, col)``."""

    ensure_cell(row, col)
    return solution[row][col] == value


__all__ = ["PuzzleResult", "check_move", "generate_sudoku", "validate_puzzle"]

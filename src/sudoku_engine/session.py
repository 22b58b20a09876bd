"""Helpers for an in-progress game, evaluated against the known solution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .grid import EMPTY, SIZE, Grid, copy_grid, ensure_cell, ensure_grid


@dataclass(frozen=True)
class BoardReview:
    """Outcome of checking the player's own entries."""

    incorrect: List[Tuple[int, int]] = field(default_factory=list)
    correct_count: int = 0

    @property
    def wrong_count(self) -> int:
        return len(self.incorrect)

    @property
    def ok(self) -> bool:
        return not self.incorrect


def reset_state(puzzle: Sequence[Sequence[int]]) -> Grid:
    ensure_grid(puzzle, name="puzzle")
    return copy_grid(puzzle)


def is_complete(state: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` once every cell of ``state`` matches the solution."""

    ensure_grid(state, name="state")
    ensure_grid(solution, name="solution")
    return all(state[r][c] == solution[r][c] for r in range(SIZE) for c in range(SIZE))


def review_board(
    puzzle: Sequence[Sequence[int]],
    state: Sequence[Sequence[int]],
    solution: Sequence[Sequence[int]],
) -> BoardReview:
    """Classify the filled, non-given cells of ``state``.

    Givens and empty cells are ignored.
    """

    ensure_grid(puzzle, name="puzzle")
    ensure_grid(state, name="state")
    ensure_grid(solution, name="solution")
    incorrect: List[Tuple[int, int]] = []
    correct = 0
    for r in range(SIZE):
        for c in range(SIZE):
            if puzzle[r][c] != EMPTY or state[r][c] == EMPTY:
                continue
            if state[r][c] == solution[r][c]:
                correct += 1
            else:
                incorrect.append((r, c))
    return BoardReview(incorrect=incorrect, correct_count=correct)


def apply_hint(
    puzzle: Sequence[Sequence[int]],
    state: Sequence[Sequence[int]],
    solution: Sequence[Sequence[int]],
    row: int,
    col: int,
) -> Optional[Grid]:
    """Return a copy of ``state`` with ``(row, col)`` revealed.

    ``None`` means there is nothing to reveal: the cell is a given or the
    player's entry is already correct.
    """

    ensure_cell(row, col)
    ensure_grid(puzzle, name="puzzle")
    ensure_grid(state, name="state")
    ensure_grid(solution, name="solution")
    if puzzle[row][col] != EMPTY or state[row][col] == solution[row][col]:
        return None
    revealed = copy_grid(state)
    revealed[row][col] = solution[row][col]
    return revealed


__all__ = ["BoardReview", "apply_hint", "is_complete", "reset_state", "review_board"]

"""Sudoku puzzle generation and validation engine."""

from __future__ import annotations

from .api import PuzzleResult, check_move, generate_sudoku, validate_puzzle
from .carver import CLUE_RANGES, Difficulty, carve, clue_count, clue_range
from .errors import CellIndexError, EngineError, InvalidGridError, UnsupportedDifficultyError
from .generator import generate_solved_grid
from .grid import Grid
from .session import BoardReview, apply_hint, is_complete, reset_state, review_board
from .solver import count_solutions, solve
from .validity import is_valid

__all__ = [
    "BoardReview",
    "CLUE_RANGES",
    "CellIndexError",
    "Difficulty",
    "EngineError",
    "Grid",
    "InvalidGridError",
    "PuzzleResult",
    "UnsupportedDifficultyError",
    "apply_hint",
    "carve",
    "check_move",
    "clue_count",
    "clue_range",
    "count_solutions",
    "generate_solved_grid",
    "generate_sudoku",
    "is_complete",
    "is_valid",
    "reset_state",
    "review_board",
    "solve",
    "validate_puzzle",
]

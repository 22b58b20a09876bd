from __future__ import annotations

import pytest

from sudoku_engine.errors import CellIndexError
from sudoku_engine.session import apply_hint, is_complete, reset_state, review_board


def _state_with_entries(puzzle, entries):
    state = [row[:] for row in puzzle]
    for (r, c), value in entries.items():
        state[r][c] = value
    return state


def test_reset_state_copies_puzzle(classic_puzzle):
    state = reset_state(classic_puzzle)
    assert state == classic_puzzle
    state[0][2] = 4
    assert classic_puzzle[0][2] == 0


def test_is_complete(classic_puzzle, classic_solution):
    assert is_complete(classic_solution, classic_solution) is True
    assert is_complete(classic_puzzle, classic_solution) is False
    wrong = [row[:] for row in classic_solution]
    wrong[8][8], wrong[8][7] = wrong[8][7], wrong[8][8]
    assert is_complete(wrong, classic_solution) is False


def test_review_board_counts_player_entries(classic_puzzle, classic_solution):
    # r0c2 should be 4, r0c3 should be 6
    state = _state_with_entries(classic_puzzle, {(0, 2): 4, (0, 3): 1})
    review = review_board(classic_puzzle, state, classic_solution)
    assert review.correct_count == 1
    assert review.wrong_count == 1
    assert review.incorrect == [(0, 3)]
    assert review.ok is False


def test_review_board_ignores_givens_and_blanks(classic_puzzle, classic_solution):
    review = review_board(classic_puzzle, reset_state(classic_puzzle), classic_solution)
    assert review.ok is True
    assert review.correct_count == 0


def test_apply_hint_reveals_cell(classic_puzzle, classic_solution):
    state = _state_with_entries(classic_puzzle, {(0, 3): 1})
    revealed = apply_hint(classic_puzzle, state, classic_solution, 0, 3)
    assert revealed is not None
    assert revealed[0][3] == 6
    assert state[0][3] == 1


def test_apply_hint_nothing_to_reveal(classic_puzzle, classic_solution):
    state = _state_with_entries(classic_puzzle, {(0, 2): 4})
    assert apply_hint(classic_puzzle, state, classic_solution, 0, 0) is None
    assert apply_hint(classic_puzzle, state, classic_solution, 0, 2) is None


def test_apply_hint_checks_indices(classic_puzzle, classic_solution):
    with pytest.raises(CellIndexError):
        apply_hint(classic_puzzle, classic_puzzle, classic_solution, 9, 0)

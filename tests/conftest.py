from __future__ import annotations

import pytest

from sudoku_engine.grid import from_string

CLASSIC_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def assert_solved(grid) -> None:
    """Every row, column and box must be a permutation of 1..9."""

    digits = set(range(1, 10))
    for r in range(9):
        assert set(grid[r]) == digits
    for c in range(9):
        assert {grid[r][c] for r in range(9)} == digits
    for br in (0, 3, 6):
        for bc in (0, 3, 6):
            assert {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == digits


@pytest.fixture
def classic_puzzle():
    return from_string(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution():
    return from_string(CLASSIC_SOLUTION)

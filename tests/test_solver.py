from __future__ import annotations

import random

import pytest

from conftest import assert_solved
from sudoku_engine.grid import empty_grid
from sudoku_engine.solver import count_solutions, find_empty, solve


def _dead_end(classic_solution):
    """Row 0 ends up missing only a 3, which column 0 already holds."""

    grid = [row[:] for row in classic_solution]
    grid[0][0] = 0
    grid[0][1] = 5
    return grid


def test_solve_completes_classic_puzzle(classic_puzzle, classic_solution):
    grid = [row[:] for row in classic_puzzle]
    assert solve(grid, random.Random(1)) is True
    assert grid == classic_solution


def test_solve_full_grid_returns_immediately(classic_solution):
    grid = [row[:] for row in classic_solution]
    assert find_empty(grid) is None
    assert solve(grid) is True
    assert grid == classic_solution


def test_solve_from_empty_yields_valid_grid():
    grid = empty_grid()
    assert solve(grid, random.Random(42)) is True
    assert_solved(grid)


def test_solve_failure_restores_grid(classic_solution):
    grid = _dead_end(classic_solution)
    snapshot = [row[:] for row in grid]
    assert solve(grid, random.Random(3)) is False
    assert grid == snapshot


def test_solve_respects_injected_rng():
    first = empty_grid()
    second = empty_grid()
    solve(first, random.Random("same"))
    solve(second, random.Random("same"))
    assert first == second


def test_count_unique_puzzle(classic_puzzle):
    snapshot = [row[:] for row in classic_puzzle]
    assert count_solutions(classic_puzzle) == 1
    assert classic_puzzle == snapshot


def test_count_stops_at_cap_on_sparse_grid():
    grid = empty_grid()
    assert count_solutions(grid) == 2
    assert count_solutions(grid, cap=5) == 5
    assert count_solutions(grid, cap=1) == 1
    assert grid == empty_grid()


def test_count_zero_for_dead_end(classic_solution):
    grid = _dead_end(classic_solution)
    snapshot = [row[:] for row in grid]
    assert count_solutions(grid) == 0
    assert grid == snapshot


def test_count_full_grid_is_one(classic_solution):
    assert count_solutions(classic_solution) == 1


def test_count_rejects_non_positive_cap():
    with pytest.raises(ValueError):
        count_solutions(empty_grid(), cap=0)

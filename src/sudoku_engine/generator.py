"""Solved-grid generation."""

from __future__ import annotations

import random
from typing import Optional

from .grid import Grid, empty_grid
from .solver import solve


def generate_solved_grid(rng: Optional[random.Random] = None) -> Grid:
    """Return a freshly filled, valid 9x9 grid.

    An empty grid is always completable, so the solver's return value is not
    an error path here.
    """

    grid = empty_grid()
    solve(grid, rng)
    return grid


__all__ = ["generate_solved_grid"]

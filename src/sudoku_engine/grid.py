"""Grid helpers: shape checks, copies and lossless 81-cell encodings."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .errors import CellIndexError, InvalidGridError

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
EMPTY = 0

Grid = List[List[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def copy_grid(g: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in g]


def ensure_grid(grid: object, *, name: str = "grid") -> None:
    """Raise :class:`InvalidGridError` unless ``grid`` is 9x9 with cells in ``0..9``."""

    if not isinstance(grid, (list, tuple)) or len(grid) != SIZE:
        raise InvalidGridError("grid.shape", f"{name} must have {SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != SIZE:
            raise InvalidGridError("grid.shape", f"{name}[{r}] must have {SIZE} cells")
        for c, value in enumerate(row):
            # bool is an int subclass but never a digit
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= SIZE:
                raise InvalidGridError("grid.value", f"{name}[{r}][{c}]={value!r}")


def ensure_cell(row: object, col: object) -> None:
    for label, value in (("row", row), ("col", col)):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < SIZE:
            raise CellIndexError("cell.index", f"{label}={value!r}")


def count_clues(g: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in g for v in row if v != EMPTY)


def positions() -> List[tuple[int, int]]:
    """All 81 ``(row, col)`` pairs in row-major order."""

    return [(r, c) for r in range(SIZE) for c in range(SIZE)]


def to_string(g: Sequence[Sequence[int]]) -> str:
    return "".join(str(g[r][c] or 0) for r in range(SIZE) for c in range(SIZE))


def from_string(s: str) -> Grid:
    """Parse an 81-character row-major string; ``0`` or ``.`` mark empty cells."""

    s = s.strip().replace("\n", "").replace(" ", "")
    if len(s) != CELLS:
        raise InvalidGridError("grid.shape", f"expected {CELLS} characters, got {len(s)}")
    grid = []
    for r in range(SIZE):
        row = []
        for ch in s[r * SIZE:(r + 1) * SIZE]:
            if ch == ".":
                row.append(EMPTY)
            elif ch in "0123456789":
                row.append(int(ch))
            else:
                raise InvalidGridError("grid.value", f"unexpected character {ch!r}")
        grid.append(row)
    return grid


def to_flat(g: Sequence[Sequence[int]]) -> List[int]:
    return [g[r][c] for r in range(SIZE) for c in range(SIZE)]


def from_flat(values: Iterable[int]) -> Grid:
    flat = list(values)
    if len(flat) != CELLS:
        raise InvalidGridError("grid.shape", f"expected {CELLS} values, got {len(flat)}")
    grid = [flat[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]
    ensure_grid(grid)
    return grid


def format_grid(g: Sequence[Sequence[int]]) -> str:
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append("+-------+-------+-------+")
        row = []
        for c in range(SIZE):
            v = g[r][c]
            row.append(str(v) if v != EMPTY else ".")
            if c % BOX == BOX - 1:
                row.append("|")
        lines.append("| " + " ".join(row[:-1]) + " |")
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


__all__ = [
    "BOX",
    "CELLS",
    "EMPTY",
    "Grid",
    "SIZE",
    "copy_grid",
    "count_clues",
    "empty_grid",
    "ensure_cell",
    "ensure_grid",
    "format_grid",
    "from_flat",
    "from_string",
    "positions",
    "to_flat",
    "to_string",
]

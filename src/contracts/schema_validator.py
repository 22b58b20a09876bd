"""JSON Schema and semantic checks for stored puzzle records."""

from __future__ import annotations

from typing import Any, Dict, List

import jsonschema
from jsonschema.exceptions import best_match

from sudoku_engine.carver import Difficulty
from sudoku_engine.errors import InvalidGridError
from sudoku_engine.grid import count_clues, from_string
from sudoku_engine.validity import has_conflicts

from .errors import RecordValidationError

RECORD_TYPE = "SudokuPuzzle"
SCHEMA_VERSION = "1"

PUZZLE_RECORD_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": f"sudoku-engine/{RECORD_TYPE}/{SCHEMA_VERSION}",
    "type": "object",
    "additionalProperties": False,
    "required": ["type", "schema_version", "difficulty", "clues", "puzzle", "solution", "record_id"],
    "properties": {
        "type": {"const": RECORD_TYPE},
        "schema_version": {"const": SCHEMA_VERSION},
        "difficulty": {"enum": [level.value for level in Difficulty]},
        "clues": {"type": "integer", "minimum": 0, "maximum": 81},
        "puzzle": {"type": "string", "pattern": "^[0-9]{81}$"},
        "solution": {"type": "string", "pattern": "^[1-9]{81}$"},
        "record_id": {"type": "string", "pattern": "^sha256-[0-9a-f]{64}$"},
    },
}

_VALIDATOR = jsonschema.Draft202012Validator(PUZZLE_RECORD_SCHEMA)


def _error_path(error: jsonschema.ValidationError) -> str:
    components: List[str] = ["$"]
    for part in error.absolute_path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def check_schema(record: Any) -> None:
    """Raise :class:`RecordValidationError` if ``record`` violates the schema."""

    error = best_match(_VALIDATOR.iter_errors(record))
    if error is not None:
        raise RecordValidationError("schema.invalid", f"{_error_path(error)}: {error.message}")


def check_semantics(record: Dict[str, Any]) -> None:
    """Cross-field checks the schema cannot express."""

    try:
        puzzle = from_string(record["puzzle"])
        solution = from_string(record["solution"])
    except InvalidGridError as exc:  # pragma: no cover - patterns already enforce the shape
        raise RecordValidationError("record.grid", str(exc)) from exc

    if has_conflicts(solution):
        raise RecordValidationError("record.solution_invalid", "solution breaks a row, column or box")
    for r in range(9):
        for c in range(9):
            if puzzle[r][c] != 0 and puzzle[r][c] != solution[r][c]:
                raise RecordValidationError("record.inconsistent", f"cell r{r + 1}c{c + 1}")
    clues = count_clues(puzzle)
    if record["clues"] != clues:
        raise RecordValidationError("record.clue_mismatch", f"declared {record['clues']}, found {clues}")


def validate_record(record: Any) -> None:
    check_schema(record)
    check_semantics(record)


__all__ = [
    "PUZZLE_RECORD_SCHEMA",
    "RECORD_TYPE",
    "SCHEMA_VERSION",
    "check_schema",
    "check_semantics",
    "validate_record",
]

"""File-backed storage for generated puzzle/solution pairs."""

from __future__ import annotations

import hashlib
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List

from contracts.errors import RecordValidationError
from contracts.schema_validator import RECORD_TYPE, SCHEMA_VERSION, validate_record
from project_config import get_section, resolve_path
from sudoku_engine.api import PuzzleResult
from sudoku_engine.carver import Difficulty
from sudoku_engine.grid import count_clues, ensure_grid, from_string, to_string

_LOGGER = logging.getLogger(__name__)

_RECORD_ID = re.compile(r"^sha256-[0-9a-f]{64}$")


def _store_root(root: str | Path | None) -> Path:
    if root is None:
        root = get_section("store.root", "artifacts")
    return resolve_path(root) / RECORD_TYPE


def canonicalize(obj: Dict[str, Any]) -> bytes:
    """Serialise *obj* into canonical JSON bytes.

    Keys are sorted and the output contains no insignificant whitespace.
    """

    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compute_record_id(record: Dict[str, Any]) -> str:
    """Hash the canonical form of ``record`` with its ``record_id`` removed."""

    base = dict(record)
    base.pop("record_id", None)
    digest = hashlib.sha256(canonicalize(base)).hexdigest()
    return f"sha256-{digest}"


def build_record(result: PuzzleResult, difficulty: "Difficulty | str") -> Dict[str, Any]:
    ensure_grid(result.puzzle, name="puzzle")
    ensure_grid(result.solution, name="solution")
    record: Dict[str, Any] = {
        "type": RECORD_TYPE,
        "schema_version": SCHEMA_VERSION,
        "difficulty": Difficulty.parse(difficulty).value,
        "clues": count_clues(result.puzzle),
        "puzzle": to_string(result.puzzle),
        "solution": to_string(result.solution),
    }
    record["record_id"] = compute_record_id(record)
    return record


def save_puzzle(result: PuzzleResult, difficulty: "Difficulty | str", *, root: str | Path | None = None) -> str:
    """Persist a generated pair and return its record identifier.

    The record lands in ``<root>/SudokuPuzzle/<record_id>.json``. Saving the
    same pair twice is idempotent.
    """

    record = build_record(result, difficulty)
    validate_record(record)

    target_dir = _store_root(root)
    target_dir.mkdir(parents=True, exist_ok=True)
    record_id = record["record_id"]
    target_path = target_dir / f"{record_id}.json"
    target_path.write_bytes(canonicalize(record))
    _LOGGER.debug("stored %s puzzle as %s", record["difficulty"], record_id)
    return record_id


def load_puzzle(record_id: str, *, root: str | Path | None = None) -> Dict[str, Any]:
    """Load, re-validate and return a stored record."""

    if not _RECORD_ID.fullmatch(record_id):
        raise RecordValidationError("record.id", record_id)
    path = _store_root(root) / f"{record_id}.json"
    if not path.exists():
        raise FileNotFoundError(f"Record '{record_id}' was not found in the store")
    try:
        record = json.loads(path.read_text("utf-8"))
    except json.JSONDecodeError as exc:
        raise RecordValidationError("record.json", f"{path.name}: {exc}") from exc
    validate_record(record)
    if compute_record_id(record) != record_id:
        raise RecordValidationError("record.id_mismatch", record_id)
    return record


def record_to_result(record: Dict[str, Any]) -> PuzzleResult:
    """Rebuild engine grids from a stored record."""

    return PuzzleResult(
        puzzle=from_string(record["puzzle"]),
        solution=from_string(record["solution"]),
    )


def list_records(*, root: str | Path | None = None) -> List[str]:
    directory = _store_root(root)
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob("sha256-*.json"))


__all__ = [
    "build_record",
    "canonicalize",
    "compute_record_id",
    "list_records",
    "load_puzzle",
    "record_to_result",
    "save_puzzle",
]

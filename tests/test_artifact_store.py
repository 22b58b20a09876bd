from __future__ import annotations

import json

import pytest

from artifacts import artifact_store
from contracts.errors import RecordValidationError
from sudoku_engine import PuzzleResult, generate_sudoku


def _result(classic_puzzle, classic_solution) -> PuzzleResult:
    return PuzzleResult(puzzle=classic_puzzle, solution=classic_solution)


def test_save_and_load_round_trip(tmp_path, classic_puzzle, classic_solution):
    result = _result(classic_puzzle, classic_solution)
    record_id = artifact_store.save_puzzle(result, "hard", root=tmp_path)

    assert record_id.startswith("sha256-")
    assert (tmp_path / "SudokuPuzzle" / f"{record_id}.json").exists()

    record = artifact_store.load_puzzle(record_id, root=tmp_path)
    assert record["difficulty"] == "hard"
    assert record["clues"] == 30
    assert artifact_store.record_to_result(record) == result


def test_save_is_idempotent(tmp_path):
    result = generate_sudoku("medium", seed=12)
    first = artifact_store.save_puzzle(result, "medium", root=tmp_path)
    second = artifact_store.save_puzzle(result, "MEDIUM", root=tmp_path)
    assert first == second
    assert artifact_store.list_records(root=tmp_path) == [first]


def test_record_id_ignores_existing_id(classic_puzzle, classic_solution):
    record = artifact_store.build_record(_result(classic_puzzle, classic_solution), "easy")
    assert artifact_store.compute_record_id(record) == record["record_id"]
    assert artifact_store.canonicalize({"b": 1, "a": 2}) == b'{"a":2,"b":1}'


def test_load_detects_tampering(tmp_path, classic_puzzle, classic_solution):
    record_id = artifact_store.save_puzzle(_result(classic_puzzle, classic_solution), "easy", root=tmp_path)
    path = tmp_path / "SudokuPuzzle" / f"{record_id}.json"
    record = json.loads(path.read_text("utf-8"))
    record["difficulty"] = "expert"
    path.write_text(json.dumps(record), "utf-8")

    with pytest.raises(RecordValidationError) as excinfo:
        artifact_store.load_puzzle(record_id, root=tmp_path)
    assert excinfo.value.code == "record.id_mismatch"


def test_load_unknown_record(tmp_path):
    with pytest.raises(FileNotFoundError):
        artifact_store.load_puzzle("sha256-" + "0" * 64, root=tmp_path)


@pytest.mark.parametrize("record_id", ["not-an-id", "sha256-../../x", "sha256-" + "A" * 64, "sha256-" + "0" * 64 + "\n"])
def test_load_rejects_malformed_ids(tmp_path, record_id):
    with pytest.raises(RecordValidationError) as excinfo:
        artifact_store.load_puzzle(record_id, root=tmp_path)
    assert excinfo.value.code == "record.id"


def test_load_reports_corrupt_json(tmp_path, classic_puzzle, classic_solution):
    record_id = artifact_store.save_puzzle(_result(classic_puzzle, classic_solution), "easy", root=tmp_path)
    (tmp_path / "SudokuPuzzle" / f"{record_id}.json").write_text("{\"type\": ", "utf-8")

    with pytest.raises(RecordValidationError) as excinfo:
        artifact_store.load_puzzle(record_id, root=tmp_path)
    assert excinfo.value.code == "record.json"


def test_list_records_on_missing_store(tmp_path):
    assert artifact_store.list_records(root=tmp_path / "nowhere") == []

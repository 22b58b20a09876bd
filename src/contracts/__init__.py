"""Contracts for persisted Sudoku puzzle records."""

from __future__ import annotations

from .errors import RecordValidationError
from .schema_validator import PUZZLE_RECORD_SCHEMA, RECORD_TYPE, SCHEMA_VERSION, validate_record

__all__ = [
    "PUZZLE_RECORD_SCHEMA",
    "RECORD_TYPE",
    "RecordValidationError",
    "SCHEMA_VERSION",
    "validate_record",
]

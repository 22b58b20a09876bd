"""Exception types raised by the engine's public entry points."""

from __future__ import annotations

from typing import Optional


class EngineError(ValueError):
    """Base class for precondition violations detected by the engine."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


class InvalidGridError(EngineError):
    """Raised when a grid is not a 9x9 matrix of integers in ``0..9``."""


class UnsupportedDifficultyError(EngineError):
    """Raised for difficulty tags outside ``easy|medium|hard|expert``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("difficulty.unsupported", repr(value))


class CellIndexError(EngineError):
    """Raised when a row or column index falls outside ``0..8``."""


__all__ = [
    "CellIndexError",
    "EngineError",
    "InvalidGridError",
    "UnsupportedDifficultyError",
]

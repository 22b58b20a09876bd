"""Daily JSONL journal of generated puzzles and its summary report."""

from __future__ import annotations

import json
import logging
import threading
from collections import Counter, defaultdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping

from project_config import get_section, resolve_path
from sudoku_engine.api import PuzzleResult
from sudoku_engine.carver import Difficulty
from sudoku_engine.grid import count_clues, to_string

__all__ = ["GenerationJournal"]

_LOGGER = logging.getLogger(__name__)


class GenerationJournal:
    """Append one line per generated puzzle to ``<base_dir>/<YYYY-MM-DD>.jsonl``.

    Each instance owns its directory and lock; nothing is shared between
    journals.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        if base_dir is None:
            base_dir = resolve_path(get_section("logging.journal_dir", "logs/generation"))
        self.base_dir = Path(base_dir)
        self._lock = threading.Lock()

    def path_for(self, when: datetime) -> Path:
        return self.base_dir / f"{when.strftime('%Y-%m-%d')}.jsonl"

    def record(
        self,
        result: PuzzleResult,
        difficulty: "Difficulty | str",
        *,
        elapsed_ms: int,
        unique: bool,
        record_id: str | None = None,
    ) -> Path:
        """Append an entry for ``result`` and return the file written."""

        now = datetime.now(timezone.utc)
        entry = {
            "ts": now.isoformat(timespec="milliseconds"),
            "difficulty": Difficulty.parse(difficulty).value,
            "clues": count_clues(result.puzzle),
            "elapsed_ms": int(elapsed_ms),
            "strict_uniqueness": bool(unique),
            "record_id": record_id,
            "puzzle": to_string(result.puzzle),
        }
        line = json.dumps(entry, sort_keys=True, ensure_ascii=False)
        path = self.path_for(now)
        with self._lock:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path

    def files(self) -> List[Path]:
        if not self.base_dir.is_dir():
            return []
        return sorted(self.base_dir.glob("*.jsonl"))

    def entries(self) -> Iterator[Dict[str, Any]]:
        """Yield journal entries oldest file first; unreadable lines are skipped."""

        for path in self.files():
            for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
                if not line.strip():
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    _LOGGER.warning("skipping corrupt journal line %s:%d", path.name, number)
                    continue
                if isinstance(entry, dict) and "difficulty" in entry:
                    yield entry

    def summarize(self) -> Mapping[str, Any]:
        """Aggregate entries per difficulty: counts, clue spread and mean time."""

        counts: Counter = Counter()
        strict: Counter = Counter()
        clues: Dict[str, List[int]] = defaultdict(list)
        elapsed: Dict[str, List[int]] = defaultdict(list)
        for entry in self.entries():
            level = str(entry["difficulty"])
            counts[level] += 1
            if entry.get("strict_uniqueness"):
                strict[level] += 1
            clues[level].append(int(entry.get("clues", 0)))
            elapsed[level].append(int(entry.get("elapsed_ms", 0)))

        by_difficulty = {}
        for level in sorted(counts):
            by_difficulty[level] = {
                "count": counts[level],
                "strict": strict[level],
                "min_clues": min(clues[level]),
                "max_clues": max(clues[level]),
                "mean_clues": round(sum(clues[level]) / counts[level], 2),
                "mean_elapsed_ms": round(sum(elapsed[level]) / counts[level], 2),
            }
        return {"total": sum(counts.values()), "by_difficulty": by_difficulty}

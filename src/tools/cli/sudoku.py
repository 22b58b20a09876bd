"""Command line front-end for the Sudoku engine."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
import time
from typing import List

from artifacts import artifact_store
from contracts.errors import RecordValidationError
from generation_log import GenerationJournal
from project_config import get_generator_option, get_section
from sudoku_engine import Difficulty, EngineError, check_move, generate_sudoku, validate_puzzle
from sudoku_engine.grid import count_clues, format_grid, from_string, to_string

_LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(get_section("logging.level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _journal(args: argparse.Namespace) -> GenerationJournal | None:
    if args.log_dir:
        return GenerationJournal(args.log_dir)
    if get_section("logging.journal_enabled", False):
        return GenerationJournal()
    return None


def cmd_generate(args: argparse.Namespace) -> int:
    if args.unique is None:
        unique = bool(get_generator_option("strict_uniqueness", profile=args.profile, default=False))
    else:
        unique = args.unique
    difficulty = Difficulty.parse(args.difficulty)
    rng = random.Random(args.seed)
    journal = _journal(args)

    payloads: List[dict] = []
    for index in range(args.count):
        started = time.perf_counter()
        result = generate_sudoku(difficulty, rng=rng, unique=unique)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        record_id = None
        if args.save:
            record_id = artifact_store.save_puzzle(result, difficulty, root=args.store)
        payload = {
            "difficulty": difficulty.value,
            "clues": count_clues(result.puzzle),
            "puzzle": to_string(result.puzzle),
            "solution": to_string(result.solution),
            "record_id": record_id,
        }
        payloads.append(payload)
        _LOGGER.info("puzzle %d/%d: %d clues in %d ms", index + 1, args.count, payload["clues"], elapsed_ms)

        if journal is not None:
            journal.record(result, difficulty, elapsed_ms=elapsed_ms, unique=unique, record_id=record_id)

        if not args.json:
            header = f"# {difficulty.value} ({payload['clues']} clues)"
            if record_id:
                header += f" {record_id}"
            print(header)
            print(format_grid(result.puzzle))
            if args.show_solution:
                print(format_grid(result.solution))

    if args.json:
        print(json.dumps(payloads, indent=2, sort_keys=True))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    ok = validate_puzzle(from_string(args.puzzle))
    print("solvable" if ok else "unsolvable")
    return 0 if ok else 1


def cmd_check_move(args: argparse.Namespace) -> int:
    ok = check_move(from_string(args.solution), args.row, args.col, args.value)
    print("correct" if ok else "incorrect")
    return 0 if ok else 1


def cmd_show(args: argparse.Namespace) -> int:
    record = artifact_store.load_puzzle(args.record_id, root=args.store)
    if args.json:
        print(json.dumps(record, indent=2, sort_keys=True))
        return 0
    result = artifact_store.record_to_result(record)
    print(f"# {record['difficulty']} ({record['clues']} clues)")
    print(format_grid(result.puzzle))
    print(format_grid(result.solution))
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    summary = GenerationJournal(args.log_dir).summarize()
    if args.json:
        print(json.dumps(summary, indent=2, sort_keys=True))
        return 0
    print(f"{summary['total']} puzzles")
    for level, row in summary["by_difficulty"].items():
        print(
            f"{level:<7} count={row['count']} strict={row['strict']} "
            f"clues={row['min_clues']}-{row['max_clues']} (mean {row['mean_clues']}) "
            f"mean_ms={row['mean_elapsed_ms']}"
        )
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sudoku puzzle generation and validation")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate puzzles")
    generate.add_argument(
        "--difficulty",
        default=get_section("generator.default_difficulty", Difficulty.MEDIUM.value),
        help="easy, medium, hard or expert",
    )
    generate.add_argument("--seed", default=None, help="Seed for reproducible output")
    generate.add_argument("--count", type=int, default=1)
    generate.add_argument(
        "--unique",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Undo removals that break solution uniqueness (default: [generator] strict_uniqueness)",
    )
    generate.add_argument("--profile", default=None, help="Config profile under [generator.by_profile]")
    generate.add_argument("--save", action="store_true", help="Persist each pair to the store")
    generate.add_argument("--store", default=None, help="Store root directory")
    generate.add_argument("--log-dir", default=None, help="Append generated puzzles to a JSONL journal here")
    generate.add_argument("--show-solution", action="store_true")
    generate.add_argument("--json", action="store_true")
    generate.set_defaults(func=cmd_generate)

    validate = sub.add_parser("validate", help="Check that a puzzle has a completion")
    validate.add_argument("puzzle", help="81 characters, 0 or . for empty cells")
    validate.set_defaults(func=cmd_validate)

    move = sub.add_parser("check-move", help="Compare a value against the solution")
    move.add_argument("solution", help="81-character solved grid")
    move.add_argument("row", type=int, help="0-based row")
    move.add_argument("col", type=int, help="0-based column")
    move.add_argument("value", type=int)
    move.set_defaults(func=cmd_check_move)

    show = sub.add_parser("show", help="Print a stored puzzle")
    show.add_argument("record_id")
    show.add_argument("--store", default=None, help="Store root directory")
    show.add_argument("--json", action="store_true")
    show.set_defaults(func=cmd_show)

    stats = sub.add_parser("stats", help="Summarise the generation journal")
    stats.add_argument("--log-dir", default=None, help="Journal directory (default: [logging] journal_dir)")
    stats.add_argument("--json", action="store_true")
    stats.set_defaults(func=cmd_stats)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return args.func(args)
    except (EngineError, RecordValidationError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

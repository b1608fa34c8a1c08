"""almanac.cli
==============

Command-line entry point: read a puzzle file, print the lowest location.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .constants import END_CATEGORY, FAIL_LOG, MEMORY_DB, SEED_MODES, START_CATEGORY
from .errors import AlmanacError
from .logging_utils import log_failure
from .memory import hash_puzzle, load_memory_db, save_memory_db
from .solver import SolverConfig, solve_text


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the solver."""

    parser = argparse.ArgumentParser("almanac")
    parser.add_argument("--input_path", "--input-path", dest="input_path", required=True, help="Path to puzzle input file")
    parser.add_argument("--seed-mode", choices=SEED_MODES, default="ranges", help="Read seeds as start/length pairs or as single values")
    parser.add_argument("--max-workers", type=int, default=1, help="Number of worker processes (0 = one per CPU)")
    parser.add_argument("--validate-rules", action="store_true", help="Reject tables whose rules overlap")
    parser.add_argument("--start", default=START_CATEGORY, help="Category the seeds are expressed in")
    parser.add_argument("--end", default=END_CATEGORY, help="Terminal category")
    parser.add_argument("--no-memory", action="store_true", help="Do not read or write the answer cache")
    parser.add_argument("--memory-db", default=MEMORY_DB, help="Answer cache file")
    parser.add_argument("--fail-log", default=FAIL_LOG, help="JSON-lines file recording failed runs")
    parser.add_argument("--quiet", action="store_true", help="Only print the answer")
    args = parser.parse_args(argv)

    cfg = SolverConfig()
    cfg.start_category = args.start
    cfg.end_category = args.end
    cfg.seed_mode = args.seed_mode
    cfg.max_workers = args.max_workers
    cfg.validate_rules = args.validate_rules
    cfg.use_memory = not args.no_memory
    cfg.verbose = not args.quiet
    cfg.__post_init__()

    try:
        text = Path(args.input_path).read_text()
    except OSError as exc:
        print(f"Cannot read {args.input_path}: {exc}", file=sys.stderr)
        log_failure(args.input_path, exc, args.fail_log)
        raise SystemExit(1)

    key = hash_puzzle(text, cfg.seed_mode, cfg.start_category, cfg.end_category, cfg.validate_rules)
    memory_payload = load_memory_db(args.memory_db) if cfg.use_memory else {"results": {}}
    results = memory_payload["results"]
    if key in results:
        if cfg.verbose:
            print(f"Answer for {args.input_path} found in memory.")
        print(results[key])
        return

    try:
        answer = solve_text(text, cfg)
    except AlmanacError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        log_failure(args.input_path, exc, args.fail_log)
        raise SystemExit(1)

    print(answer)
    if cfg.use_memory:
        results[key] = answer
        save_memory_db(memory_payload, args.memory_db)


__all__ = ["main"]

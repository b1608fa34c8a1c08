"""almanac.logging_utils
========================

Simple logging utilities: progress lines on stdout and a JSON-lines record of
failed runs for later review.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from .constants import FAIL_LOG
from .types import CategoryMap, Interval


def log_failure(input_path: str, error: BaseException, path: str | Path = FAIL_LOG) -> None:
    """Append a JSON line describing the failed run to ``path``."""

    entry = {
        "input_path": str(input_path),
        "error": type(error).__name__,
        "message": str(error),
    }
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


def print_hop(table: CategoryMap, intervals: List[Interval]) -> None:
    print(f"   {table.source} -> {table.dest}: {len(table.rules)} rules, {len(intervals)} intervals")


def describe_chain(path: List[str], seeds: List[Interval]) -> None:
    """Print the category path a run is about to walk."""

    print(f"Resolving {len(seeds)} seed intervals along {' -> '.join(path)}")


__all__ = ["log_failure", "print_hop", "describe_chain"]

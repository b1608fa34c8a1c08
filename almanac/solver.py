"""almanac.solver
=================

High-level orchestration that stitches the parser, the chain traversal and the
aggregator together. Functions in this module are the primary public API used
by the CLI.
"""

from __future__ import annotations

import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .aggregate import minimum_start
from .category import validate_category_map
from .chain import chain_path, resolve_chain
from .constants import END_CATEGORY, SEED_MODES, START_CATEGORY
from .logging_utils import describe_chain, print_hop
from .parser import parse_puzzle
from .types import Chain, Interval, Puzzle


@dataclass
class SolverConfig:
    """Configuration knobs for a run."""

    start_category: str = START_CATEGORY
    end_category: str = END_CATEGORY
    seed_mode: str = "ranges"
    max_workers: int = 1
    validate_rules: bool = False
    use_memory: bool = True
    verbose: bool = True

    def __post_init__(self) -> None:
        mode = (self.seed_mode or "ranges").lower()
        if mode not in SEED_MODES:
            raise ValueError(f"Unknown seed mode {self.seed_mode!r}; expected one of {SEED_MODES}")
        self.seed_mode = mode
        if self.max_workers <= 0:
            self.max_workers = multiprocessing.cpu_count()


def resolve_seed(seed: Interval, start: str, chain: Chain, end: str) -> List[Interval]:
    """Worker function executed in subprocesses."""

    return resolve_chain([seed], start, chain, end)


def _resolve_parallel(puzzle: Puzzle, cfg: SolverConfig) -> List[Interval]:
    results: List[Interval] = []
    with ProcessPoolExecutor(max_workers=cfg.max_workers) as executor:
        futures = [
            executor.submit(resolve_seed, seed, cfg.start_category, puzzle.chain, cfg.end_category)
            for seed in puzzle.seeds
        ]
        for future in futures:
            results.extend(future.result())
    return results


def resolve_puzzle(puzzle: Puzzle, cfg: SolverConfig | None = None) -> List[Interval]:
    """Return the intervals the seeds of ``puzzle`` occupy in the terminal category."""

    cfg = cfg or SolverConfig()
    if cfg.validate_rules:
        for table in puzzle.chain.values():
            validate_category_map(table)
    path = chain_path(cfg.start_category, puzzle.chain, cfg.end_category)
    if cfg.verbose:
        describe_chain(path, list(puzzle.seeds))
    if cfg.max_workers > 1 and len(puzzle.seeds) > 1:
        return _resolve_parallel(puzzle, cfg)
    return resolve_chain(
        puzzle.seeds,
        cfg.start_category,
        puzzle.chain,
        cfg.end_category,
        on_hop=print_hop if cfg.verbose else None,
    )


def solve_puzzle(puzzle: Puzzle, cfg: SolverConfig | None = None) -> int:
    """Lowest terminal-category value reachable from the seeds of ``puzzle``."""

    return minimum_start(resolve_puzzle(puzzle, cfg))


def solve_text(text: str, cfg: SolverConfig | None = None) -> int:
    cfg = cfg or SolverConfig()
    return solve_puzzle(parse_puzzle(text, cfg.seed_mode), cfg)


def lowest_location(input_path: str | Path, cfg: SolverConfig | None = None) -> int:
    """Parse the puzzle at ``input_path`` and return its lowest location."""

    return solve_text(Path(input_path).read_text(), cfg)


__all__ = ["SolverConfig", "resolve_seed", "resolve_puzzle", "solve_puzzle", "solve_text", "lowest_location"]

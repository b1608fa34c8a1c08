"""almanac.parser
=================

Turn the plain-text puzzle description into a :class:`~almanac.types.Puzzle`.

The layout is a ``seeds:`` line followed by blank-line separated blocks, each
headed ``<source>-to-<dest> map:`` and listing ``<dst> <src> <length>`` rules.
Every deviation raises :class:`~almanac.errors.MalformedInput` carrying the
offending line number.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from .constants import MAP_SEPARATOR, MAP_SUFFIX, SEED_MODES, SEEDS_PREFIX
from .errors import MalformedInput
from .interval_utils import make_interval
from .types import CategoryMap, Interval, Puzzle, RangeMap


def parse_ints(text: str, line_no: int | None = None) -> List[int]:
    """Parse whitespace separated integers."""

    values: List[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise MalformedInput(f"Expected an integer, got {token!r}", line_no) from None
    return values


def parse_seeds(line: str, seed_mode: str = "ranges", line_no: int | None = None) -> List[Interval]:
    """Parse the ``seeds:`` line.

    In ``ranges`` mode the numbers are start/length pairs. In ``values`` mode
    every number is a seed of its own, i.e. an interval of length one.
    """

    if not line.startswith(SEEDS_PREFIX):
        raise MalformedInput(f"Expected prefix {SEEDS_PREFIX!r}, got: {line}", line_no)
    numbers = parse_ints(line[len(SEEDS_PREFIX) :], line_no)
    if seed_mode == "values":
        return [make_interval(value, 1) for value in numbers]
    if seed_mode != "ranges":
        raise ValueError(f"Unknown seed mode {seed_mode!r}; expected one of {SEED_MODES}")
    if len(numbers) % 2 != 0:
        raise MalformedInput(f"Expected start-length pairs of seeds, got: {line}", line_no)
    seeds: List[Interval] = []
    for start, length in zip(numbers[::2], numbers[1::2]):
        if length < 0:
            raise MalformedInput(f"Seed range starting at {start} has negative length {length}", line_no)
        seeds.append(make_interval(start, length))
    return seeds


def parse_header(line: str, line_no: int | None = None) -> Tuple[str, str]:
    """Parse ``<source>-to-<dest> map:`` into ``(source, dest)``."""

    parts = line.split()
    if len(parts) != 2 or parts[1] != MAP_SUFFIX:
        raise MalformedInput(f"Expected `<source>-to-<dest> {MAP_SUFFIX}`, got: {line}", line_no)
    names = parts[0].split(MAP_SEPARATOR)
    if len(names) != 2 or not all(names):
        raise MalformedInput(f"Expected `key{MAP_SEPARATOR}value`, got: {line}", line_no)
    return names[0], names[1]


def parse_rule(line: str, line_no: int | None = None) -> RangeMap:
    values = parse_ints(line, line_no)
    if len(values) != 3:
        raise MalformedInput(f"Expected `<dst> <src> <length>`, got: {line}", line_no)
    dst_start, src_start, length = values
    if length < 0:
        raise MalformedInput(f"Rule has negative length {length}", line_no)
    return RangeMap.from_triple(dst_start, src_start, length)


def parse_puzzle(text: str, seed_mode: str = "ranges") -> Puzzle:
    """Parse the full puzzle text.

    Raises
    ------
    MalformedInput
        On a missing or malformed seeds line, bad headers or rules, rules
        before any header, duplicate source categories, or no seeds at all.
    """

    lines = [(idx, raw.strip()) for idx, raw in enumerate(text.splitlines(), start=1)]
    content = [(idx, line) for idx, line in lines if line]
    if not content:
        raise MalformedInput("Expected line with seeds, got empty input")

    first_no, first_line = content[0]
    seeds = parse_seeds(first_line, seed_mode, first_no)
    if not seeds:
        raise MalformedInput("Expected at least one seed in the puzzle, got none", first_no)

    chain: Dict[str, CategoryMap] = {}
    source: str | None = None
    dest = ""
    rules: List[RangeMap] = []

    def close_block() -> None:
        if source is not None:
            chain[source] = CategoryMap(source, dest, tuple(rules))

    for line_no, line in content[1:]:
        if line.endswith(MAP_SUFFIX):
            close_block()
            source, dest = parse_header(line, line_no)
            if source in chain:
                raise MalformedInput(f"Duplicate map from category {source!r}", line_no)
            rules = []
            continue
        if source is None:
            raise MalformedInput(f"Rule outside of any map block: {line}", line_no)
        rules.append(parse_rule(line, line_no))
    close_block()

    return Puzzle(seeds=tuple(seeds), chain=chain)


def load_puzzle(path: str | Path, seed_mode: str = "ranges") -> Puzzle:
    """Read ``path`` and parse it with :func:`parse_puzzle`."""

    return parse_puzzle(Path(path).read_text(), seed_mode)


__all__ = ["parse_ints", "parse_seeds", "parse_header", "parse_rule", "parse_puzzle", "load_puzzle"]

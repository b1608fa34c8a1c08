"""almanac.category
===================

Apply a whole :class:`~almanac.types.CategoryMap` to a set of intervals.

Rules are processed in the order the table lists them. Each rule peels the
values it covers off the intervals that are still unmapped; whatever no rule
claims passes through unchanged. The output is not merged, so intervals may
overlap or touch.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .errors import OverlappingRules
from .splitter import split_interval
from .types import CategoryMap, Interval


def apply_category_map(intervals: Iterable[Interval], table: CategoryMap) -> List[Interval]:
    """Translate ``intervals`` from ``table.source`` into ``table.dest`` coordinates."""

    unmapped: List[Interval] = list(intervals)
    mapped: List[Interval] = []
    for rule in table.rules:
        remaining: List[Interval] = []
        for interval in unmapped:
            left_over, moved = split_interval(interval, rule)
            remaining.extend(left_over)
            mapped.extend(moved)
        unmapped = remaining
    # Identity for values no rule covers.
    mapped.extend(unmapped)
    return mapped


def find_rule_overlaps(table: CategoryMap) -> List[Tuple[int, int]]:
    """Return index pairs of rules in ``table`` whose source ranges overlap.

    Empty source ranges never overlap anything. The reduction above does not
    call this; overlapping rules there would emit the shared values twice.
    """

    order = sorted(range(len(table.rules)), key=lambda idx: table.rules[idx].src.start)
    overlaps: List[Tuple[int, int]] = []
    for pos, first in enumerate(order):
        src = table.rules[first].src
        for second in order[pos + 1 :]:
            other = table.rules[second].src
            if other.start >= src.end:
                break
            if src.overlaps(other):
                overlaps.append((min(first, second), max(first, second)))
    return sorted(overlaps)


def validate_category_map(table: CategoryMap) -> None:
    """Raise :class:`OverlappingRules` if ``table`` has overlapping source ranges."""

    overlaps = find_rule_overlaps(table)
    if overlaps:
        raise OverlappingRules(
            f"{table.source}-to-{table.dest} map has overlapping rules at indices {overlaps}"
        )


__all__ = ["apply_category_map", "find_rule_overlaps", "validate_category_map"]

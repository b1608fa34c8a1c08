"""almanac.types
================

Foundational data structures used throughout the almanac package. Centralising
these definitions keeps inter-module dependencies predictable: the splitter,
the table reduction and the chain traversal all import the exact same value
types.

The classes are frozen dataclasses, so intervals and rules can be copied and
shared freely without anyone mutating them behind the engine's back. Apart from
a few read-only queries no behaviour lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Interval:
    """Half-open integer range ``[start, end)``.

    Parameters
    ----------
    start:
        First value inside the interval.
    end:
        First value past the interval. ``start == end`` denotes an empty
        interval which carries no values.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start >= self.end

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def overlaps(self, other: "Interval") -> bool:
        """Return ``True`` when the two intervals share at least one value."""

        if self.is_empty() or other.is_empty():
            return False
        return self.start < other.end and other.start < self.end

    def __repr__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class RangeMap:
    """One remapping rule translating ``src`` onto ``dst``.

    Both intervals must have the same length; values inside ``src`` are shifted
    by :attr:`offset`.
    """

    src: Interval
    dst: Interval

    @property
    def offset(self) -> int:
        return self.dst.start - self.src.start

    @classmethod
    def from_triple(cls, dst_start: int, src_start: int, length: int) -> "RangeMap":
        """Build a rule from the ``<dst> <src> <length>`` order used in puzzle text."""

        return cls(
            src=Interval(src_start, src_start + length),
            dst=Interval(dst_start, dst_start + length),
        )


@dataclass(frozen=True)
class CategoryMap:
    """Named table translating values of ``source`` into ``dest``.

    ``rules`` keeps the order in which the table was listed. Values not covered
    by any rule keep their numeric value across the category boundary.
    """

    source: str
    dest: str
    rules: Tuple[RangeMap, ...] = ()


# Tables keyed by their source category name.
Chain = Dict[str, CategoryMap]


@dataclass(frozen=True)
class Puzzle:
    """Parsed puzzle: seed intervals plus the chain of tables."""

    seeds: Tuple[Interval, ...]
    chain: Chain


__all__ = ["Interval", "RangeMap", "CategoryMap", "Chain", "Puzzle"]

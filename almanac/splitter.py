"""almanac.splitter
===================

Partition one interval against one remapping rule. This is where the boundary
arithmetic lives, so the relation between the interval and the rule's source
range is first classified into an :class:`Overlap` tag and the split then
dispatches on that tag. Every tag has exactly one branch; anything that does
not fit raises :class:`~almanac.errors.InvariantViolation`.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .errors import InvariantViolation
from .interval_utils import shift
from .types import Interval, RangeMap

SplitResult = Tuple[List[Interval], List[Interval]]


class Overlap(Enum):
    """How an interval ``r`` sits relative to a rule's source range ``src``."""

    DISJOINT = "disjoint"
    CONTAINS = "contains"  # src covers all of r
    OVERFLOW_RIGHT = "overflow_right"  # r sticks out past src.end only
    OVERFLOW_LEFT = "overflow_left"  # r sticks out before src.start only
    STRICTLY_CONTAINS = "strictly_contains"  # r sticks out on both sides


def _check_well_formed(r: Interval, rule: RangeMap) -> None:
    if r.start > r.end:
        raise InvariantViolation(f"Interval {r!r} has start past its end")
    if rule.src.start > rule.src.end or rule.dst.start > rule.dst.end:
        raise InvariantViolation(f"Rule {rule!r} has an inverted range")
    if rule.src.length != rule.dst.length:
        raise InvariantViolation(
            f"Rule {rule!r} maps {rule.src.length} values onto {rule.dst.length}"
        )


def classify_overlap(r: Interval, src: Interval) -> Overlap:
    """Return the :class:`Overlap` tag describing ``r`` against ``src``.

    Both intervals must be well formed (``start <= end``). The comparisons are
    written exactly as the five half-open cases read so that any combination
    outside them falls through to :class:`InvariantViolation`.
    """

    if src.end <= r.start or src.start >= r.end:
        return Overlap.DISJOINT
    if src.start <= r.start and r.end <= src.end:
        return Overlap.CONTAINS
    if src.start <= r.start < src.end < r.end:
        return Overlap.OVERFLOW_RIGHT
    if r.start < src.start <= r.end <= src.end:
        return Overlap.OVERFLOW_LEFT
    if r.start < src.start and src.end < r.end:
        return Overlap.STRICTLY_CONTAINS
    raise InvariantViolation(f"Interval {r!r} matches no overlap case against {src!r}")


def split_interval(r: Interval, rule: RangeMap) -> SplitResult:
    """Split ``r`` into the part ``rule`` leaves alone and the part it translates.

    Parameters
    ----------
    r:
        Interval to split.
    rule:
        Remapping rule; values inside ``rule.src`` move by ``rule.offset``.

    Returns
    -------
    tuple[list[Interval], list[Interval]]
        ``(unmapped, mapped)``. Unmapped pieces stay in source coordinates,
        mapped pieces are already in destination coordinates. The lengths of
        all pieces add up to ``r.length``.

    Raises
    ------
    InvariantViolation
        If ``r`` or ``rule`` is malformed, or no case applies.
    """

    _check_well_formed(r, rule)
    src, dst, offset = rule.src, rule.dst, rule.offset
    kind = classify_overlap(r, src)

    if kind is Overlap.DISJOINT:
        return [r], []
    if kind is Overlap.CONTAINS:
        return [], [shift(r, offset)]
    if kind is Overlap.OVERFLOW_RIGHT:
        return [Interval(src.end, r.end)], [Interval(r.start + offset, src.end + offset)]
    if kind is Overlap.OVERFLOW_LEFT:
        return [Interval(r.start, src.start)], [Interval(src.start + offset, r.end + offset)]
    if kind is Overlap.STRICTLY_CONTAINS:
        return [Interval(r.start, src.start), Interval(src.end, r.end)], [Interval(dst.start, dst.end)]
    raise InvariantViolation(f"Unhandled overlap kind {kind!r}")


__all__ = ["Overlap", "SplitResult", "classify_overlap", "split_interval"]

from __future__ import annotations

from typing import Iterable

import numpy as np

from .types import Interval

# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------
def make_interval(start: int, length: int) -> Interval:
    """Return the interval covering ``length`` values from ``start``.

    Parameters
    ----------
    start:
        First value of the interval.
    length:
        Number of values covered. Must be non-negative; callers parsing user
        input are expected to reject negative lengths before calling.

    Returns
    -------
    Interval
        ``[start, start + length)``.
    """

    return Interval(start, start + length)


def shift(interval: Interval, offset: int) -> Interval:
    """Translate ``interval`` by ``offset`` keeping its length."""

    return Interval(interval.start + offset, interval.end + offset)


# ---------------------------------------------------------------------------
# Collection queries
# ---------------------------------------------------------------------------
def total_length(intervals: Iterable[Interval]) -> int:
    """Sum of the lengths of ``intervals``.

    Overlapping intervals are counted once per occurrence; the remapping
    engine never merges its outputs so this is the quantity it conserves.
    """

    lengths = np.fromiter((interval.length for interval in intervals), dtype=np.int64)
    return int(lengths.sum())


__all__ = ["make_interval", "shift", "total_length"]

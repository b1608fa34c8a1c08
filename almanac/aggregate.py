"""almanac.aggregate
====================

Reduce the terminal interval set to the single number the puzzle asks for.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .errors import MissingMinimum
from .types import Interval


def minimum_start(intervals: Iterable[Interval]) -> int:
    """Return the smallest ``start`` among ``intervals``.

    An empty sequence means values were lost upstream, so it raises
    :class:`MissingMinimum` instead of returning a sentinel.
    """

    starts = np.fromiter((interval.start for interval in intervals), dtype=np.int64)
    if starts.size == 0:
        raise MissingMinimum("No intervals left to take a minimum of")
    return int(starts.min())


__all__ = ["minimum_start"]

"""almanac.chain
================

Walk a chain of tables from a start category to a terminal category.

The walk is bounded by the number of tables in the chain: a valid chain is a
simple path, so reaching the terminal category never needs more hops than
there are tables. A cyclic chain therefore stops with
:class:`~almanac.errors.ChainIncomplete` instead of looping forever.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from .category import apply_category_map
from .errors import ChainIncomplete, MissingCategory
from .types import CategoryMap, Chain, Interval

HopCallback = Callable[[CategoryMap, List[Interval]], None]


def _lookup(chain: Chain, key: str) -> CategoryMap:
    try:
        return chain[key]
    except KeyError:
        raise MissingCategory(key, chain.keys()) from None


def resolve_chain(
    initial: Iterable[Interval],
    start: str,
    chain: Chain,
    end: str,
    on_hop: Optional[HopCallback] = None,
) -> List[Interval]:
    """Push ``initial`` through ``chain`` from ``start`` until ``end`` is reached.

    Parameters
    ----------
    initial:
        Intervals expressed in the ``start`` category.
    start, end:
        Names of the first source category and of the terminal category.
    chain:
        Tables keyed by source category.
    on_hop:
        Optional callback invoked after each table with the table and the
        intervals it produced. Used for progress output.

    Raises
    ------
    MissingCategory
        When no table has the current category as its source.
    ChainIncomplete
        When ``len(chain)`` hops do not reach ``end``.
    """

    current = list(initial)
    key = start
    for _ in range(len(chain)):
        table = _lookup(chain, key)
        current = apply_category_map(current, table)
        if on_hop is not None:
            on_hop(table, current)
        key = table.dest
        if key == end:
            return current
    raise ChainIncomplete(
        f"Maps from {start!r} do not reach {end!r} within {len(chain)} steps (stopped at {key!r})"
    )


def chain_path(start: str, chain: Chain, end: str) -> List[str]:
    """Return the category names visited from ``start`` to ``end`` inclusive.

    Uses the same bound and raises the same errors as :func:`resolve_chain`
    without touching any intervals, so a broken chain can be reported before
    any work is scheduled.
    """

    path = [start]
    key = start
    for _ in range(len(chain)):
        key = _lookup(chain, key).dest
        path.append(key)
        if key == end:
            return path
    raise ChainIncomplete(
        f"Maps from {start!r} do not reach {end!r} within {len(chain)} steps: {' -> '.join(path)}"
    )


__all__ = ["HopCallback", "resolve_chain", "chain_path"]

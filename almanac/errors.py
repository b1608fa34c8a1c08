"""almanac.errors
=================

Exception hierarchy shared by the parser and the remapping engine. Every error
derives from :class:`AlmanacError` so the command-line entry point can report
failures with a single ``except`` clause. Where a built-in exception carries the
same meaning the class also inherits from it, which keeps ``except KeyError``
style handling in callers working.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base class for all failures raised by :mod:`almanac`."""


class MalformedInput(AlmanacError, ValueError):
    """The puzzle text does not follow the expected layout."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class MissingCategory(AlmanacError, KeyError):
    """The chain has no table whose source is the requested category."""

    def __init__(self, category: str, available) -> None:
        super().__init__(category)
        self.category = category
        self.available = sorted(available)

    def __str__(self) -> str:
        return f"Missing map from category {self.category!r}. Known sources: {self.available}"


class ChainIncomplete(AlmanacError):
    """Traversal used up its step bound without reaching the terminal category."""


class MissingMinimum(AlmanacError, ValueError):
    """The final interval set is empty, so no minimum exists."""


class InvariantViolation(AlmanacError, AssertionError):
    """An interval/rule pair matched none of the split cases."""


class OverlappingRules(AlmanacError, ValueError):
    """A table lists rules whose source ranges overlap."""


__all__ = [
    "AlmanacError",
    "MalformedInput",
    "MissingCategory",
    "ChainIncomplete",
    "MissingMinimum",
    "InvariantViolation",
    "OverlappingRules",
]

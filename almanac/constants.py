"""almanac.constants
====================

Global constants used across the engine. Keeping them here avoids import cycles
between modules and makes it easier to discover configurable paths.
"""

from __future__ import annotations

START_CATEGORY = "seed"
END_CATEGORY = "location"

SEEDS_PREFIX = "seeds:"
MAP_SEPARATOR = "-to-"
MAP_SUFFIX = "map:"

SEED_MODES = ("ranges", "values")

MEMORY_DB = "almanac_memory.json"
FAIL_LOG = "almanac_failures.jsonl"

__all__ = [
    "START_CATEGORY",
    "END_CATEGORY",
    "SEEDS_PREFIX",
    "MAP_SEPARATOR",
    "MAP_SUFFIX",
    "SEED_MODES",
    "MEMORY_DB",
    "FAIL_LOG",
]

"""almanac.memory
=================

Persistence helpers for caching answers between runs.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict

from .constants import MEMORY_DB


def hash_puzzle(text: str, seed_mode: str, start: str, end: str, validate_rules: bool = False) -> str:
    """Stable key for one puzzle text evaluated under one configuration."""

    payload = json.dumps(
        {"text": text, "seed_mode": seed_mode, "start": start, "end": end, "validate_rules": validate_rules},
        sort_keys=True,
    )
    return hashlib.md5(payload.encode()).hexdigest()


def load_memory_db(path: str | Path = MEMORY_DB) -> Dict[str, Any]:
    """Load cached answers from ``path``; missing, corrupt or foreign files yield an empty cache."""

    path = Path(path)
    if not path.exists():
        return {"results": {}}
    try:
        raw = json.loads(path.read_text())
    except json.JSONDecodeError:
        return {"results": {}}
    if not isinstance(raw, dict):
        return {"results": {}}
    raw.setdefault("results", {})
    return raw


def save_memory_db(db: Dict[str, Any], path: str | Path = MEMORY_DB) -> None:
    """Persist ``db`` to ``path`` with indentation for readability."""

    db.setdefault("results", {})
    Path(path).write_text(json.dumps(db, indent=2))


__all__ = ["hash_puzzle", "load_memory_db", "save_memory_db"]

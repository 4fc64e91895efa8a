"""
Flat JSON file persistence.

Each collection is one file holding a JSON array of objects. Reads and writes
always move the whole array; neither function raises to its caller.

These two functions do no locking: two interleaved load -> mutate -> save
sequences on the same file end with the later save winning. Callers that
need serialized mutation go through JsonCollection.transaction().
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from api.utils.logger import configure_logging

logger = configure_logging()


def load(path: str | Path, default: Any = None) -> Any:
    """
    Read and parse a JSON file.

    A missing file is created holding `default` (an empty list when omitted)
    and `default` is returned. I/O and parse errors are logged and also yield `default`.
    """
    if default is None:
        default = []
    path = Path(path)
    try:
        if not path.exists():
            logger.info("store file not found, creating path=%s", path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(default, indent=2), encoding="utf-8")
            return default
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("store read failed path=%s error=%s", path, e)
        return default


def save(path: str | Path, records: list) -> bool:
    """Overwrite `path` with `records` as 2-space indented JSON. Returns False on any failure."""
    path = Path(path)
    if not isinstance(records, list):
        logger.error("store write refused path=%s reason=not a list type=%s", path, type(records).__name__)
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error("store write failed path=%s error=%s", path, e)
        return False

"""
Repository over the JSON collection files.

One JsonCollection per file owns that file's in-memory cache. Every read and
write in the application goes through it, so the cache and the disk never
diverge within a process. Mutations made inside transaction() hold the
collection's lock for the whole read-modify-write, so concurrent requests
cannot lose each other's updates.
"""

from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from api.storage import json_store
from api.utils.logger import configure_logging

logger = configure_logging()

Record = dict[str, Any]
Predicate = Callable[[Record], bool]


class JsonCollection:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.name = self.path.stem
        self._lock = threading.RLock()
        self._records: Optional[list[Record]] = None

    def _loaded(self) -> list[Record]:
        if self._records is None:
            data = json_store.load(self.path, [])
            if not isinstance(data, list):
                logger.error("collection file is not an array name=%s type=%s", self.name, type(data).__name__)
                data = []
            self._records = data
        return self._records

    def reload(self) -> None:
        """Drop the cache; the next read goes back to disk."""
        with self._lock:
            self._records = None

    def all(self) -> list[Record]:
        with self._lock:
            return copy.deepcopy(self._loaded())

    def filter(self, predicate: Predicate) -> list[Record]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._loaded() if predicate(r)]

    def find(self, predicate: Predicate) -> Optional[Record]:
        with self._lock:
            for r in self._loaded():
                if predicate(r):
                    return copy.deepcopy(r)
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._loaded())

    @contextmanager
    def transaction(self) -> Iterator[list[Record]]:
        """
        Yield the live record list under the collection lock and save it on exit.
        If the block raises, the cache is restored and nothing is written.
        """
        with self._lock:
            records = self._loaded()
            snapshot = copy.deepcopy(records)
            try:
                yield records
            except BaseException:
                self._records = snapshot
                raise
            if not json_store.save(self.path, records):
                logger.warning("collection save failed, keeping in-memory state name=%s", self.name)

    def insert(self, record: Record) -> Record:
        with self.transaction() as records:
            records.append(record)
        return copy.deepcopy(record)

    def update_where(self, predicate: Predicate, changes: Record) -> Optional[Record]:
        """Merge `changes` into the first matching record. Returns the updated copy or None."""
        with self.transaction() as records:
            for r in records:
                if predicate(r):
                    r.update(changes)
                    return copy.deepcopy(r)
        return None

    def delete_where(self, predicate: Predicate) -> Optional[Record]:
        """Remove the first matching record and return it, or None when nothing matched."""
        with self.transaction() as records:
            for i, r in enumerate(records):
                if predicate(r):
                    return records.pop(i)
        return None


class Repository:
    """All collections of one data directory."""

    FILES = {
        "users": "users.json",
        "courses": "courses.json",
        "user_courses": "userCourses.json",
        "learning_paths": "learningPaths.json",
        "skill_assessments": "skillAssessments.json",
        "code_snippets": "codeSnippets.json",
        "shared_code": "sharedCode.json",
    }

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self.users = JsonCollection(self.data_dir / self.FILES["users"])
        self.courses = JsonCollection(self.data_dir / self.FILES["courses"])
        self.user_courses = JsonCollection(self.data_dir / self.FILES["user_courses"])
        self.learning_paths = JsonCollection(self.data_dir / self.FILES["learning_paths"])
        self.skill_assessments = JsonCollection(self.data_dir / self.FILES["skill_assessments"])
        self.code_snippets = JsonCollection(self.data_dir / self.FILES["code_snippets"])
        self.shared_code = JsonCollection(self.data_dir / self.FILES["shared_code"])

    def collections(self) -> dict[str, JsonCollection]:
        return {name: getattr(self, name) for name in self.FILES}

    def stats(self) -> dict[str, int]:
        return {name: c.count() for name, c in self.collections().items()}


def owned_by(user_id: str, record_id: Optional[str] = None) -> Predicate:
    """Predicate matching records of one user, optionally one record id."""

    def _match(r: Record) -> bool:
        if r.get("userId") != user_id:
            return False
        return record_id is None or r.get("id") == record_id

    return _match

"""Learning path records and per-course completion tracking."""

from __future__ import annotations

from typing import Any, Optional

from api.utils.common import iso_now
from api.utils.ids import uuid_like

IMMUTABLE_FIELDS = ("id", "userId", "createdAt")
LIST_FIELDS = ("courses", "completedCourses")


def new_learning_path(
    user_id: str,
    name: str,
    courses: list[Any],
    description: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> dict[str, Any]:
    now = iso_now()
    return {
        "id": uuid_like(),
        "userId": user_id,
        "name": name,
        "description": description or f"Learning path for {name}",
        "courses": list(courses),
        "currentCourseIndex": 0,
        "completedCourses": [],
        "difficulty": difficulty or "intermediate",
        "adaptiveDifficulty": True,
        "progress": 0,
        "createdAt": now,
        "updatedAt": now,
    }


def merge_updates(path: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    """
    Shallow-merge client updates into `path` in place, ignoring identity fields.
    Raises ValueError, leaving `path` untouched, when a list field gets a non-list value.
    """
    for key in LIST_FIELDS:
        if key in updates and not isinstance(updates[key], list):
            raise ValueError(f"{key} must be a list")
    for key, value in updates.items():
        if key not in IMMUTABLE_FIELDS:
            path[key] = value
    path["updatedAt"] = iso_now()
    return path


def apply_course_progress(path: dict[str, Any], course_index: int, completed: bool) -> dict[str, Any]:
    """
    Mark one course of the path completed (or not) and recompute the path's
    progress and current course. Raises ValueError for an index outside the path.
    """
    courses = path.get("courses")
    if not isinstance(courses, list):
        raise ValueError("learning path has no course list")
    if course_index < 0 or course_index >= len(courses):
        raise ValueError(f"courseIndex {course_index} is out of range")

    prior = path.get("completedCourses")
    done = {i for i in (prior if isinstance(prior, list) else []) if isinstance(i, int) and 0 <= i < len(courses)}
    if completed:
        done.add(course_index)
    else:
        done.discard(course_index)

    path["completedCourses"] = sorted(done)
    path["progress"] = int(len(done) / len(courses) * 100 + 0.5)
    remaining = [i for i in range(len(courses)) if i not in done]
    path["currentCourseIndex"] = remaining[0] if remaining else len(courses) - 1
    path["updatedAt"] = iso_now()
    return path

"""
User library service: generated courses, progress and completion credit.

Progress updates lock userCourses first and users second; every path that
touches both collections uses that order.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

from api.storage import Repository, owned_by
from api.utils.common import clamp_progress, iso_now
from api.utils.ids import prefixed_id
from api.utils.logger import configure_logging

logger = configure_logging()


def record_generated_course(repo: Repository, user_id: str, topic: str, document: dict[str, Any]) -> dict[str, Any]:
    """
    Give the document a course id, append it to the course history and enroll the user.
    Returns the stored document.
    """
    course_id = prefixed_id("course")
    now = iso_now()
    document = {**document, "id": course_id}
    repo.courses.insert(document)
    repo.user_courses.insert(
        {
            "id": course_id,
            "userId": user_id,
            "topic": topic,
            "course": document,
            "createdAt": now,
            "updatedAt": now,
            "completed": False,
            "progress": 0,
            "liked": False,
        }
    )
    logger.info("course recorded id=%s user=%s fallback=%s", course_id, user_id, bool(document.get("isFallback")))
    return document


def save_course(repo: Repository, user_id: str, topic: str, course: dict[str, Any]) -> dict[str, Any]:
    """
    Save a client-supplied course document into the caller's library. The document's
    own string id is kept unless the caller already has an entry with that id.
    """
    now = iso_now()
    with repo.user_courses.transaction() as records:
        course_id = course.get("id")
        if not isinstance(course_id, str) or not course_id or any(owned_by(user_id, course_id)(r) for r in records):
            course_id = prefixed_id("course")
        uc = {
            "id": course_id,
            "userId": user_id,
            "topic": topic,
            "course": {**course, "id": course_id},
            "createdAt": now,
            "updatedAt": now,
            "completed": False,
            "progress": 0,
            "liked": False,
        }
        records.append(uc)
    return copy.deepcopy(uc)


def update_progress(
    repo: Repository,
    user_id: str,
    course_id: str,
    progress: Optional[int],
    completed: Optional[bool],
    study_minutes: int,
) -> Optional[dict[str, Any]]:
    """
    Apply a progress update to one owned UserCourse. The first transition to completed
    credits the owner with one course and `study_minutes` of study time; later updates
    to an already completed course credit nothing. Returns None when not found.
    """
    match = owned_by(user_id, course_id)
    now = iso_now()
    with repo.user_courses.transaction() as records:
        uc = next((r for r in records if match(r)), None)
        if uc is None:
            return None

        was_completed = bool(uc.get("completed"))
        if progress is not None:
            uc["progress"] = clamp_progress(progress)
        if completed is not None:
            uc["completed"] = bool(completed)
        uc["lastAccessedAt"] = now
        uc["updatedAt"] = now

        if uc["completed"] and not was_completed:
            with repo.users.transaction() as users:
                user = next((u for u in users if u.get("id") == user_id), None)
                if user is not None:
                    user["coursesCompleted"] = int(user.get("coursesCompleted") or 0) + 1
                    user["totalStudyTime"] = int(user.get("totalStudyTime") or 0) + study_minutes
                    logger.info("course completed id=%s user=%s", course_id, user_id)
                else:
                    logger.warning("completion credit skipped, user missing user=%s", user_id)
        return copy.deepcopy(uc)


def set_liked(repo: Repository, user_id: str, course_id: str, liked: bool) -> Optional[dict[str, Any]]:
    return repo.user_courses.update_where(owned_by(user_id, course_id), {"liked": bool(liked), "updatedAt": iso_now()})

"""
Dashboard aggregation over a user's library.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from api.utils.common import newest_first, parse_iso, public_user

MINUTES_PER_MODULE = 15
DEFAULT_COURSE_MINUTES = 30
RECENT_LIMIT = 5
FAVORITE_LIMIT = 5


def _round_half_up(x: float) -> int:
    return int(x + 0.5)


def _estimated_minutes(user_course: dict[str, Any]) -> int:
    course = user_course.get("course") or {}
    parts = course.get("modules") or course.get("sections") or []
    return len(parts) * MINUTES_PER_MODULE or DEFAULT_COURSE_MINUTES


def _progress(user_course: dict[str, Any]) -> int:
    try:
        return int(user_course.get("progress") or 0)
    except (TypeError, ValueError):
        return 0


def build_dashboard(user: dict[str, Any], user_courses: list[dict[str, Any]], now: Optional[datetime] = None) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    week_ago = now - timedelta(days=7)

    total = len(user_courses)
    completed = sum(1 for c in user_courses if c.get("completed"))
    stats = {
        "totalCourses": total,
        "completedCourses": completed,
        "inProgressCourses": sum(1 for c in user_courses if _progress(c) > 0 and not c.get("completed")),
        "totalStudyTime": sum(_estimated_minutes(c) for c in user_courses if _progress(c) > 0),
        "coursesThisWeek": sum(
            1 for c in user_courses if (parse_iso(c.get("createdAt")) or datetime.min.replace(tzinfo=timezone.utc)) > week_ago
        ),
        "completionRate": _round_half_up(completed / total * 100) if total else 0,
    }

    recent = [
        {"topic": (c.get("course") or {}).get("title") or c.get("topic") or "Unknown Topic", "createdAt": c.get("createdAt")}
        for c in newest_first(user_courses)[:RECENT_LIMIT]
    ]

    counts = Counter(c.get("topic") or "General" for c in user_courses)
    favorites = [{"topic": t, "count": n} for t, n in counts.most_common(FAVORITE_LIMIT)]

    achievements = [
        {"name": "First Course", "description": "Generated your first AI course", "unlocked": total > 0},
        {"name": "Course Collector", "description": "Generated 5 or more courses", "unlocked": total >= 5},
        {"name": "Dedicated Learner", "description": "Completed 3 or more courses", "unlocked": completed >= 3},
    ]

    return {
        "user": public_user(user),
        "stats": stats,
        "recentActivity": recent,
        "favoriteTopics": favorites,
        "achievements": achievements,
    }

from datetime import datetime, timezone

import pytest

from api.services.dashboard_service import build_dashboard

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
USER = {"id": "u1", "name": "Ada", "email": "ada@example.com", "password": "hash", "coursesCompleted": 1}


def uc(topic, created, progress=0, completed=False, modules=0, title=None):
    course = {"modules": [{}] * modules}
    if title:
        course["title"] = title
    return {"id": topic, "userId": "u1", "topic": topic, "course": course,
            "createdAt": created, "progress": progress, "completed": completed}


@pytest.mark.unit
class TestBuildDashboard:
    def test_empty(self):
        d = build_dashboard(USER, [], now=NOW)
        assert d["stats"]["totalCourses"] == 0
        assert d["stats"]["completionRate"] == 0
        assert d["recentActivity"] == []
        assert [a["unlocked"] for a in d["achievements"]] == [False, False, False]
        assert "password" not in d["user"]

    def test_stats(self):
        courses = [
            uc("kafka", "2025-06-14T10:00:00.000Z", progress=100, completed=True, modules=3, title="Kafka Course"),
            uc("rust", "2025-06-01T10:00:00.000Z", progress=40),
            uc("kafka", "2025-06-13T10:00:00.000Z"),
        ]
        d = build_dashboard(USER, courses, now=NOW)
        s = d["stats"]
        assert s["totalCourses"] == 3
        assert s["completedCourses"] == 1
        assert s["inProgressCourses"] == 1
        assert s["totalStudyTime"] == 3 * 15 + 30
        assert s["coursesThisWeek"] == 2
        assert s["completionRate"] == 33
        assert d["recentActivity"][0] == {"topic": "Kafka Course", "createdAt": "2025-06-14T10:00:00.000Z"}
        assert [r["topic"] for r in d["recentActivity"]] == ["Kafka Course", "kafka", "rust"]
        assert d["favoriteTopics"][0] == {"topic": "kafka", "count": 2}
        assert d["achievements"][0]["unlocked"] is True

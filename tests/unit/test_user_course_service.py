"""Unit tests for library persistence and completion credit."""
import pytest

from api.services.user_course_service import record_generated_course, save_course, set_liked, update_progress
from api.utils.auth import get_user_by_id


@pytest.mark.unit
class TestRecordGeneratedCourse:
    def test_appends_course_and_enrollment(self, repo, sample_user):
        doc = record_generated_course(repo, sample_user["id"], "kafka", {"title": "Kafka"})
        assert doc["id"].startswith("course_")
        assert repo.courses.all() == [doc]
        enrollment = repo.user_courses.all()[0]
        assert enrollment["id"] == doc["id"]
        assert enrollment["userId"] == sample_user["id"]
        assert enrollment["progress"] == 0
        assert enrollment["completed"] is False
        assert enrollment["liked"] is False
        assert enrollment["course"]["title"] == "Kafka"


@pytest.mark.unit
class TestSaveCourse:
    def test_keeps_string_id(self, repo):
        saved = save_course(repo, "u1", "kafka", {"id": "course_1_abc", "title": "Kafka"})
        assert saved["id"] == "course_1_abc"

    def test_resaving_same_id_gets_fresh_id(self, repo):
        first = save_course(repo, "u1", "kafka", {"id": "course_dup", "title": "Kafka"})
        second = save_course(repo, "u1", "kafka", {"id": "course_dup", "title": "Kafka"})
        assert first["id"] == "course_dup"
        assert second["id"] != "course_dup"
        assert second["course"]["id"] == second["id"]
        assert sorted(r["id"] for r in repo.user_courses.all()) == sorted([first["id"], second["id"]])

    def test_same_id_for_another_user_is_kept(self, repo):
        save_course(repo, "u1", "kafka", {"id": "course_dup", "title": "Kafka"})
        assert save_course(repo, "u2", "kafka", {"id": "course_dup", "title": "Kafka"})["id"] == "course_dup"

    def test_assigns_id(self, repo):
        saved = save_course(repo, "u1", "kafka", {"id": 7, "title": "Kafka"})
        assert saved["id"].startswith("course_")
        assert saved["course"]["id"] == saved["id"]


@pytest.mark.unit
class TestUpdateProgress:
    def test_clamps_progress(self, repo, sample_user):
        doc = record_generated_course(repo, sample_user["id"], "kafka", {"title": "Kafka"})
        assert update_progress(repo, sample_user["id"], doc["id"], 150, None, 25)["progress"] == 100
        assert update_progress(repo, sample_user["id"], doc["id"], -5, None, 25)["progress"] == 0

    def test_completion_credited_once(self, repo, sample_user):
        uid = sample_user["id"]
        doc = record_generated_course(repo, uid, "kafka", {"title": "Kafka"})
        update_progress(repo, uid, doc["id"], 100, True, 25)
        update_progress(repo, uid, doc["id"], 100, True, 25)
        user = get_user_by_id(uid, repo)
        assert user["coursesCompleted"] == 1
        assert user["totalStudyTime"] == 25

    def test_recompletion_after_reset_credits_again(self, repo, sample_user):
        uid = sample_user["id"]
        doc = record_generated_course(repo, uid, "kafka", {"title": "Kafka"})
        update_progress(repo, uid, doc["id"], None, True, 25)
        update_progress(repo, uid, doc["id"], None, False, 25)
        update_progress(repo, uid, doc["id"], None, True, 25)
        assert get_user_by_id(uid, repo)["coursesCompleted"] == 2

    def test_foreign_course_not_found(self, repo, sample_user):
        doc = record_generated_course(repo, sample_user["id"], "kafka", {"title": "Kafka"})
        assert update_progress(repo, "someone-else", doc["id"], 50, None, 25) is None

    def test_sets_timestamps(self, repo, sample_user):
        doc = record_generated_course(repo, sample_user["id"], "kafka", {"title": "Kafka"})
        updated = update_progress(repo, sample_user["id"], doc["id"], 10, None, 25)
        assert updated["lastAccessedAt"] == updated["updatedAt"]


@pytest.mark.unit
class TestSetLiked:
    def test_like_and_unlike(self, repo, sample_user):
        doc = record_generated_course(repo, sample_user["id"], "kafka", {"title": "Kafka"})
        assert set_liked(repo, sample_user["id"], doc["id"], True)["liked"] is True
        assert set_liked(repo, sample_user["id"], doc["id"], False)["liked"] is False
        assert set_liked(repo, "other", doc["id"], True) is None

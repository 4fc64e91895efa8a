import pytest

from api.services.learning_path_service import apply_course_progress, merge_updates, new_learning_path


@pytest.fixture
def path():
    return new_learning_path("u1", "Backend", ["c1", "c2", "c3", "c4"])


@pytest.mark.unit
class TestNewLearningPath:
    def test_defaults(self, path):
        assert path["description"] == "Learning path for Backend"
        assert path["difficulty"] == "intermediate"
        assert path["adaptiveDifficulty"] is True
        assert path["currentCourseIndex"] == 0
        assert path["completedCourses"] == []
        assert path["progress"] == 0


@pytest.mark.unit
class TestMergeUpdates:
    def test_identity_fields_are_immutable(self, path):
        path_id = path["id"]
        merge_updates(path, {"id": "hijack", "userId": "u2", "name": "Renamed", "difficulty": "advanced"})
        assert path["id"] == path_id
        assert path["userId"] == "u1"
        assert path["name"] == "Renamed"
        assert path["difficulty"] == "advanced"

    @pytest.mark.parametrize("updates", [{"courses": 5}, {"completedCourses": "0,1"}])
    def test_list_fields_must_be_lists(self, path, updates):
        with pytest.raises(ValueError):
            merge_updates(path, {"name": "Renamed", **updates})
        assert path["name"] == "Backend"
        assert path["courses"] == ["c1", "c2", "c3", "c4"]


@pytest.mark.unit
class TestApplyCourseProgress:
    def test_complete_first_course(self, path):
        apply_course_progress(path, 0, True)
        assert path["completedCourses"] == [0]
        assert path["progress"] == 25
        assert path["currentCourseIndex"] == 1

    def test_out_of_order_completion(self, path):
        apply_course_progress(path, 2, True)
        assert path["currentCourseIndex"] == 0
        apply_course_progress(path, 0, True)
        assert path["currentCourseIndex"] == 1

    def test_completion_is_idempotent(self, path):
        apply_course_progress(path, 1, True)
        apply_course_progress(path, 1, True)
        assert path["completedCourses"] == [1]

    def test_uncomplete(self, path):
        apply_course_progress(path, 1, True)
        apply_course_progress(path, 1, False)
        assert path["completedCourses"] == []
        assert path["progress"] == 0

    def test_all_complete(self, path):
        for i in range(4):
            apply_course_progress(path, i, True)
        assert path["progress"] == 100
        assert path["currentCourseIndex"] == 3

    def test_out_of_range(self, path):
        with pytest.raises(ValueError):
            apply_course_progress(path, 4, True)

    def test_stored_non_list_courses(self, path):
        path["courses"] = 5
        with pytest.raises(ValueError):
            apply_course_progress(path, 0, True)

    def test_stored_non_list_completed_is_reset(self, path):
        path["completedCourses"] = 3
        apply_course_progress(path, 0, True)
        assert path["completedCourses"] == [0]

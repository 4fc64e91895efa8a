import pytest

from migrations.data_migration import migrate_user_courses, migrate_user_data, run_migration


@pytest.mark.unit
class TestMigrateUserCourses:
    def test_renames_favorite_and_coerces_progress(self, repo):
        repo.user_courses.insert({"id": "c1", "userId": "u1", "favorite": True, "progress": "40", "createdAt": "2024-01-01T00:00:00.000Z"})
        assert migrate_user_courses(repo) == 1
        uc = repo.user_courses.all()[0]
        assert uc["liked"] is True
        assert "favorite" not in uc
        assert uc["progress"] == 40
        assert uc["updatedAt"] == "2024-01-01T00:00:00.000Z"

    def test_normalized_records_untouched(self, repo):
        repo.user_courses.insert({"id": "c1", "userId": "u1", "liked": False, "progress": 10, "updatedAt": "x"})
        assert migrate_user_courses(repo) == 0

    def test_existing_liked_wins_over_favorite(self, repo):
        repo.user_courses.insert({"id": "c1", "favorite": True, "liked": False, "progress": 0, "updatedAt": "x"})
        migrate_user_courses(repo)
        assert repo.user_courses.all()[0]["liked"] is False


@pytest.mark.unit
class TestMigrateUserData:
    def test_adds_missing_fields(self, repo):
        repo.users.insert({"id": "1", "email": "a@b.c"})
        assert migrate_user_data(repo) == 1
        user = repo.users.all()[0]
        assert user["createdAt"].endswith("Z")
        assert user["preferences"] == {"theme": "dark", "notifications": True}


@pytest.mark.unit
class TestRunMigration:
    def test_empty_store(self, repo):
        assert run_migration(repo) == {"users": 0, "userCourses": 0}

    def test_second_run_is_noop(self, repo):
        repo.users.insert({"id": "1", "email": "a@b.c"})
        repo.user_courses.insert({"id": "c1", "favorite": False, "progress": 5.0})
        assert run_migration(repo) == {"users": 1, "userCourses": 1}
        assert run_migration(repo) == {"users": 0, "userCourses": 0}

"""
Migration: normalize legacy JSON records at startup.

- users: add createdAt and default preferences where missing.
- userCourses: rename favorite -> liked, coerce progress to int, add updatedAt.

Safe to run on every boot; already-normalized records are left as they are.
"""

from api.storage import Repository
from api.utils.common import iso_now
from api.utils.logger import configure_logging

logger = configure_logging()

DEFAULT_PREFERENCES = {"theme": "dark", "notifications": True}


def _to_int(value) -> int:
    try:
        return int(float(value or 0))
    except (TypeError, ValueError):
        return 0


def migrate_user_data(repo: Repository) -> int:
    """Returns the number of user records changed."""
    changed = 0
    with repo.users.transaction() as users:
        for user in users:
            touched = False
            if not user.get("createdAt"):
                user["createdAt"] = iso_now()
                touched = True
            if not user.get("preferences"):
                user["preferences"] = dict(DEFAULT_PREFERENCES)
                touched = True
            changed += touched
    if changed:
        logger.info("users migration completed changed=%d", changed)
    else:
        logger.info("users migration: no changes needed")
    return changed


def migrate_user_courses(repo: Repository) -> int:
    """Returns the number of user course records changed."""
    changed = 0
    with repo.user_courses.transaction() as records:
        for uc in records:
            touched = False
            if "favorite" in uc and "liked" not in uc:
                uc["liked"] = uc.pop("favorite")
                touched = True
            if not isinstance(uc.get("progress"), int) or isinstance(uc.get("progress"), bool):
                uc["progress"] = _to_int(uc.get("progress"))
                touched = True
            if not uc.get("updatedAt"):
                uc["updatedAt"] = uc.get("createdAt") or iso_now()
                touched = True
            changed += touched
    if changed:
        logger.info("userCourses migration completed changed=%d", changed)
    else:
        logger.info("userCourses migration: no changes needed")
    return changed


def run_migration(repo: Repository) -> dict[str, int]:
    return {
        "users": migrate_user_data(repo),
        "userCourses": migrate_user_courses(repo),
    }


if __name__ == "__main__":
    from api.config import get_repository

    print(run_migration(get_repository()))

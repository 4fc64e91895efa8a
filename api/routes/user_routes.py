"""
User library, preferences and dashboard endpoints. Every read is filtered by the caller's id;
another user's record is reported as not found.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from api.config import Settings, get_repository, get_settings
from api.schemas.auth_schemas import AuthTokenPayload
from api.schemas.user_course_schemas import (
    DashboardResponse,
    LikeRequest,
    MessageResponse,
    ProgressUpdateRequest,
    SaveCourseRequest,
    UserCourseListResponse,
    UserCourseUpdateResponse,
)
from api.services.dashboard_service import build_dashboard
from api.services.user_course_service import save_course, set_liked, update_progress
from api.storage import Repository, owned_by
from api.utils.auth import get_current_user, get_user_by_id
from api.utils.common import newest_first

user_routes = APIRouter()


class UpdatePreferencesRequest(BaseModel):
    preferences: dict[str, Any]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")


@user_routes.get("/courses", response_model=UserCourseListResponse)
def list_user_courses(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> UserCourseListResponse:
    courses = newest_first(repo.user_courses.filter(owned_by(current_user.userId)))
    return UserCourseListResponse(
        courses=courses,
        total=len(courses),
        completed=sum(1 for c in courses if c.get("completed")),
    )


@user_routes.post("/courses", status_code=status.HTTP_201_CREATED)
def save_user_course(
    req: SaveCourseRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    """Save a course document into the caller's library."""
    return save_course(repo, current_user.userId, req.topic.strip(), req.course)


@user_routes.get("/courses/{course_id}")
def get_user_course(
    course_id: str,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    uc = repo.user_courses.find(owned_by(current_user.userId, course_id))
    if uc is None:
        raise _not_found()
    return uc


@user_routes.delete("/courses/{course_id}", response_model=MessageResponse)
def delete_user_course(
    course_id: str,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> MessageResponse:
    if repo.user_courses.delete_where(owned_by(current_user.userId, course_id)) is None:
        raise _not_found()
    return MessageResponse(message="Course deleted successfully")


@user_routes.put("/courses/{course_id}/progress", response_model=UserCourseUpdateResponse)
def update_user_course_progress(
    course_id: str,
    req: ProgressUpdateRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> UserCourseUpdateResponse:
    """Clamp and store progress; the first completion credits the user once."""
    uc = update_progress(
        repo,
        current_user.userId,
        course_id,
        req.progress,
        req.completed,
        settings.course_study_minutes,
    )
    if uc is None:
        raise _not_found()
    return UserCourseUpdateResponse(message="Progress updated", course=uc)


@user_routes.put("/courses/{course_id}/like", response_model=UserCourseUpdateResponse)
def like_user_course(
    course_id: str,
    req: LikeRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> UserCourseUpdateResponse:
    uc = set_liked(repo, current_user.userId, course_id, req.liked)
    if uc is None:
        raise _not_found()
    return UserCourseUpdateResponse(message="Course liked" if req.liked else "Course unliked", course=uc)


@user_routes.patch("/preferences")
def update_user_preferences(
    body: UpdatePreferencesRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    """Merge the given keys into the caller's preferences."""
    with repo.users.transaction() as users:
        user = next((u for u in users if u.get("id") == current_user.userId), None)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        prefs = dict(user.get("preferences") or {})
        prefs.update(body.preferences)
        user["preferences"] = prefs
    return {"preferences": prefs}


@user_routes.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    user = get_user_by_id(current_user.userId, repo)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return build_dashboard(user, repo.user_courses.filter(owned_by(current_user.userId)))

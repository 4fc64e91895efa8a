"""
User library schemas (saved courses, progress, likes, dashboard).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class SaveCourseRequest(BaseModel):
    topic: str = Field(min_length=1)
    course: dict[str, Any]


class ProgressUpdateRequest(BaseModel):
    progress: Optional[int] = None
    completed: Optional[bool] = None


class LikeRequest(BaseModel):
    liked: bool


class UserCourseListResponse(BaseModel):
    """Caller's library, newest first, with totals."""
    courses: list[dict[str, Any]]
    total: int
    completed: int


class UserCourseUpdateResponse(BaseModel):
    message: str
    course: dict[str, Any]


class MessageResponse(BaseModel):
    message: str


class DashboardStats(BaseModel):
    totalCourses: int
    completedCourses: int
    inProgressCourses: int
    totalStudyTime: int
    coursesThisWeek: int
    completionRate: int


class RecentActivityItem(BaseModel):
    topic: str
    createdAt: Optional[str] = None


class FavoriteTopic(BaseModel):
    topic: str
    count: int


class Achievement(BaseModel):
    name: str
    description: str
    unlocked: bool


class DashboardResponse(BaseModel):
    user: dict[str, Any]
    stats: DashboardStats
    recentActivity: list[RecentActivityItem]
    favoriteTopics: list[FavoriteTopic]
    achievements: list[Achievement]

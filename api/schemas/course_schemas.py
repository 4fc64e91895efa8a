"""
Catalog and course generation schemas.
"""

from pydantic import BaseModel, Field


class CatalogCourse(BaseModel):
    id: int
    title: str
    description: str
    difficulty: str
    duration: str
    topics: list[str]
    color: str


class GenerateCourseRequest(BaseModel):
    topic: str = Field(min_length=1)


class NonEducationalResponse(BaseModel):
    non_educational: bool = True
    message: str

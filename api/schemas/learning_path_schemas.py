from typing import Optional, Union

from pydantic import BaseModel, Field


class CreateLearningPathRequest(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    courses: list[Union[str, int]]
    difficulty: Optional[str] = None


class LearningPathProgressRequest(BaseModel):
    courseIndex: int = Field(ge=0)
    completed: bool = True

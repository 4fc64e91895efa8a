"""
Skill assessment schemas.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GenerateAssessmentRequest(BaseModel):
    topic: str = Field(min_length=1)


class InteractionData(BaseModel):
    """Time (or counts) the learner spent per content type; only the ratios matter."""
    timeSpentOnText: float = 0
    timeSpentOnVisuals: float = 0
    interactiveElementsUsed: float = 0


class SubmitAssessmentRequest(BaseModel):
    answers: list[Optional[int]]
    interactionData: Optional[InteractionData] = None


class Performance(BaseModel):
    correctAnswers: int
    totalQuestions: int
    percentage: int


class SubmitAssessmentResponse(BaseModel):
    assessment: dict[str, Any]
    performance: Performance

"""
Skill assessment endpoints.
"""

import copy

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import get_repository
from api.schemas.assessment_schemas import GenerateAssessmentRequest, SubmitAssessmentRequest, SubmitAssessmentResponse
from api.schemas.auth_schemas import AuthTokenPayload
from api.services.assessment_service import new_assessment, score_submission
from api.storage import Repository, owned_by
from api.utils.auth import get_current_user
from api.utils.logger import configure_logging

logger = configure_logging()

assessment_routes = APIRouter()


@assessment_routes.get("")
def list_assessments(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> list[dict]:
    return repo.skill_assessments.filter(owned_by(current_user.userId))


@assessment_routes.post("/generate", status_code=status.HTTP_201_CREATED)
def generate_assessment(
    req: GenerateAssessmentRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    topic = req.topic.strip()
    if not topic:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic is required")
    return repo.skill_assessments.insert(new_assessment(current_user.userId, topic))


@assessment_routes.post("/{assessment_id}/submit", response_model=SubmitAssessmentResponse)
def submit_assessment(
    assessment_id: str,
    req: SubmitAssessmentRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> SubmitAssessmentResponse:
    """Grade the answers and store skill gaps, learning style and recommendations."""
    match = owned_by(current_user.userId, assessment_id)
    interaction = req.interactionData.model_dump() if req.interactionData else None
    with repo.skill_assessments.transaction() as assessments:
        assessment = next((a for a in assessments if match(a)), None)
        if assessment is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
        performance = score_submission(assessment, req.answers, interaction)
        result = copy.deepcopy(assessment)
    logger.info("assessment graded id=%s score=%s%%", assessment_id, performance["percentage"])
    return SubmitAssessmentResponse(assessment=result, performance=performance)

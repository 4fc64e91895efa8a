"""
Course catalog and course generation endpoints.
"""

from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from api.config import get_repository
from api.schemas.auth_schemas import AuthTokenPayload
from api.schemas.course_schemas import CatalogCourse, GenerateCourseRequest, NonEducationalResponse
from api.services.catalog import PREDEFINED_COURSES, get_catalog_course
from api.services.course_resolver import CourseContentResolver, get_resolver
from api.services.topic_classifier import NON_EDUCATIONAL_MESSAGE, is_educational_query
from api.services.user_course_service import record_generated_course
from api.storage import Repository
from api.utils.auth import get_current_user
from api.utils.logger import configure_logging, log_request

logger = configure_logging()

course_routes = APIRouter()


@course_routes.get("/courses", response_model=list[CatalogCourse])
def list_catalog() -> list[dict]:
    return PREDEFINED_COURSES


@course_routes.get("/courses/{course_id}", response_model=CatalogCourse)
def get_catalog_entry(course_id: str) -> dict:
    try:
        course = get_catalog_course(int(course_id))
    except ValueError:
        course = None
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@course_routes.post("/generate-course", response_model=None)
async def generate_course(
    req: GenerateCourseRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
    resolver: CourseContentResolver = Depends(get_resolver),
) -> Union[dict, NonEducationalResponse]:
    """
    Generate a course for `topic` and add it to the caller's library.
    Non-technical topics are declined with 200 {non_educational: true, message}.
    """
    topic = req.topic.strip()
    if not topic:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic is required")

    if not is_educational_query(topic):
        logger.info("topic declined as non-educational user=%s topic=%r", current_user.userId, topic)
        return NonEducationalResponse(message=NON_EDUCATIONAL_MESSAGE)

    with log_request(logger, f"resolve course user={current_user.userId}"):
        resolved = await resolver.resolve(topic)
    logger.info("course resolved user=%s source=%s model=%s", current_user.userId, resolved.source, resolved.model)
    return await run_in_threadpool(record_generated_course, repo, current_user.userId, topic, resolved.document)

"""
API schemas package. Import from submodules or from this package.

Example:
    from api.schemas import GenerateCourseRequest, AuthResponse
    from api.schemas.course_schemas import GenerateCourseRequest
"""

from api.schemas.auth_schemas import (
    AuthResponse,
    AuthTokenPayload,
    LoginRequest,
    PublicUser,
    RegisterRequest,
)
from api.schemas.course_schemas import (
    CatalogCourse,
    GenerateCourseRequest,
    NonEducationalResponse,
)
from api.schemas.user_course_schemas import (
    DashboardResponse,
    LikeRequest,
    MessageResponse,
    ProgressUpdateRequest,
    SaveCourseRequest,
    UserCourseListResponse,
    UserCourseUpdateResponse,
)
from api.schemas.learning_path_schemas import (
    CreateLearningPathRequest,
    LearningPathProgressRequest,
)
from api.schemas.assessment_schemas import (
    GenerateAssessmentRequest,
    InteractionData,
    Performance,
    SubmitAssessmentRequest,
    SubmitAssessmentResponse,
)
from api.schemas.code_schemas import (
    ExecuteCodeRequest,
    ExecuteCodeResponse,
    SaveSnippetRequest,
    ShareCodeRequest,
    ShareCodeResponse,
)

__all__ = [
    "AuthResponse",
    "AuthTokenPayload",
    "LoginRequest",
    "PublicUser",
    "RegisterRequest",
    "CatalogCourse",
    "GenerateCourseRequest",
    "NonEducationalResponse",
    "DashboardResponse",
    "LikeRequest",
    "MessageResponse",
    "ProgressUpdateRequest",
    "SaveCourseRequest",
    "UserCourseListResponse",
    "UserCourseUpdateResponse",
    "CreateLearningPathRequest",
    "LearningPathProgressRequest",
    "GenerateAssessmentRequest",
    "InteractionData",
    "Performance",
    "SubmitAssessmentRequest",
    "SubmitAssessmentResponse",
    "ExecuteCodeRequest",
    "ExecuteCodeResponse",
    "SaveSnippetRequest",
    "ShareCodeRequest",
    "ShareCodeResponse",
]

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import get_repository
from api.schemas.auth_schemas import AuthResponse, AuthTokenPayload, LoginRequest, PublicUser, RegisterRequest
from api.storage import Repository, owned_by
from api.utils.auth import authenticate_user, create_user, get_current_user, get_user_by_id
from api.utils.common import newest_first, public_user
from api.utils.jwt import create_access_token
from api.utils.logger import configure_logging

logger = configure_logging()

auth_routes = APIRouter()

RECENT_ACTIVITY_LIMIT = 5


@auth_routes.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
def register(request: RegisterRequest, repo: Repository = Depends(get_repository)) -> AuthResponse:
    """Register a new user and return a bearer token."""
    name, email = request.name.strip(), request.email.strip()
    if not name or not email or not request.password.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")

    user = create_user(name, email, request.password, repo)
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    token = create_access_token(user["id"], user["email"])
    return AuthResponse(message="User registered successfully", token=token, user=PublicUser(**public_user(user)))


@auth_routes.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, repo: Repository = Depends(get_repository)) -> AuthResponse:
    email = request.email.strip()
    if not email or not request.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")

    user = authenticate_user(email, request.password, repo)
    if user is None:
        logger.info("login rejected email=%s", email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    token = create_access_token(user["id"], user["email"])
    return AuthResponse(message="Login successful", token=token, user=PublicUser(**public_user(user)))


@auth_routes.get("/me")
def get_current_user_info(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    """Caller's public profile with course count and the five newest library entries."""
    user = get_user_by_id(current_user.userId, repo)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    courses = repo.user_courses.filter(owned_by(user["id"]))
    return {
        **public_user(user),
        "totalCourses": len(courses),
        "recentActivity": newest_first(courses)[:RECENT_ACTIVITY_LIMIT],
    }

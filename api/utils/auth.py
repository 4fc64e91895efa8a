from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.schemas.auth_schemas import AuthTokenPayload
from api.storage import Repository
from api.utils.common import iso_now
from api.utils.ids import timestamp_id
from api.utils.jwt import get_password_hash, verify_password, verify_token
from api.utils.logger import configure_logging

logger = configure_logging()
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthTokenPayload:
    """Token payload of the caller. 401 when no bearer token is sent, 403 when it is invalid or expired."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")
    payload = verify_token(credentials.credentials)
    if payload is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")
    return payload


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[AuthTokenPayload]:
    """Like get_current_user, but anonymous callers get None instead of 401."""
    if credentials is None or not credentials.credentials:
        return None
    return get_current_user(credentials)


def get_user_by_email(email: str, repo: Repository) -> dict | None:
    return repo.users.find(lambda u: u.get("email") == email)


def get_user_by_id(user_id: str, repo: Repository) -> dict | None:
    return repo.users.find(lambda u: u.get("id") == user_id)


def create_user(name: str, email: str, password: str, repo: Repository) -> dict | None:
    """
    Create and persist a user. Returns None when the email is already registered;
    the uniqueness check and the insert happen under the users lock.
    """
    user = {
        "id": timestamp_id(),
        "name": name,
        "email": email,
        "password": get_password_hash(password),
        "createdAt": iso_now(),
        "coursesCompleted": 0,
        "totalStudyTime": 0,
        "favoriteTopics": [],
        "preferences": {"theme": "dark", "notifications": True},
    }
    with repo.users.transaction() as users:
        if any(u.get("email") == email for u in users):
            return None
        users.append(user)
    logger.info("user created id=%s", user["id"])
    return user


def authenticate_user(email: str, password: str, repo: Repository) -> dict | None:
    user = get_user_by_email(email, repo)
    if not user or not verify_password(password, user.get("password", "")):
        return None
    return user


from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError
from jose.jwt import decode, encode

from api.config import get_settings
from api.schemas.auth_schemas import AuthTokenPayload
from api.utils.logger import configure_logging

ALGORITHM = "HS256"
# bcrypt only looks at the first 72 bytes; newer releases raise instead of truncating.
BCRYPT_MAX_BYTES = 72

logger = configure_logging()


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.warning("password verification failed error=%s", e)
        return False


def get_password_hash(password: str) -> str:
    """Hash a password for storing."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=10)).decode("utf-8")


def create_access_token(user_id: str, email: str, expires_in: Optional[timedelta] = None) -> str:
    """Signed token carrying {userId, email}; expires after settings.jwt_expire_days by default."""
    settings = get_settings()
    exp = datetime.now(timezone.utc) + (expires_in or timedelta(days=settings.jwt_expire_days))
    payload = AuthTokenPayload(userId=user_id, email=email, exp=exp)
    return encode(payload.model_dump(), settings.jwt_secret, algorithm=ALGORITHM)


def verify_token(token: str) -> Optional[AuthTokenPayload]:
    """Decoded payload, or None when the token is invalid or expired."""
    try:
        payload = decode(token, get_settings().jwt_secret, algorithms=[ALGORITHM])
        return AuthTokenPayload(**payload)
    except ExpiredSignatureError:
        logger.info("token expired")
        return None
    except (JWTError, ValueError) as e:
        logger.info("token rejected error=%s", e)
        return None

"""
Common utility functions used across multiple routes.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def iso_format(dt: datetime) -> str:
    """Format a datetime as an ISO string with millisecond precision and a Z suffix."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat(timespec="milliseconds") + "Z"


def iso_now() -> str:
    return iso_format(datetime.now(timezone.utc))


def parse_iso(value: Any) -> Optional[datetime]:
    """Parse a stored ISO timestamp into an aware UTC datetime; None when missing or malformed."""
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def public_user(user: dict) -> dict:
    """User fields safe to return to clients."""
    return {
        "id": user.get("id"),
        "name": user.get("name"),
        "email": user.get("email"),
        "coursesCompleted": int(user.get("coursesCompleted") or 0),
        "totalStudyTime": int(user.get("totalStudyTime") or 0),
    }


def clamp_progress(value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, n))


def newest_first(records: list[dict], key: str = "createdAt") -> list[dict]:
    epoch = datetime.min.replace(tzinfo=timezone.utc)
    return sorted(records, key=lambda r: parse_iso(r.get(key)) or epoch, reverse=True)

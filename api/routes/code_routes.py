"""
Code playground endpoints: simulated execution, saved snippets, share links.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import get_repository
from api.schemas.auth_schemas import AuthTokenPayload
from api.schemas.code_schemas import (
    ExecuteCodeRequest,
    ExecuteCodeResponse,
    SaveSnippetRequest,
    ShareCodeRequest,
    ShareCodeResponse,
)
from api.services.code_execution import default_snippet_title, shared_code_expiry, simulate_execution
from api.storage import Repository, owned_by
from api.utils.auth import get_current_user, get_optional_user
from api.utils.common import iso_format, iso_now, parse_iso
from api.utils.ids import uuid_like

code_routes = APIRouter()


@code_routes.post("/execute-code", response_model=ExecuteCodeResponse)
def execute_code(
    req: ExecuteCodeRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
) -> ExecuteCodeResponse:
    return ExecuteCodeResponse(output=simulate_execution(req.code, req.language))


@code_routes.post("/code-snippets", status_code=status.HTTP_201_CREATED)
def save_snippet(
    req: SaveSnippetRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    now = iso_now()
    snippet = {
        "id": uuid_like(),
        "userId": current_user.userId,
        "title": (req.title or "").strip() or default_snippet_title(req.language),
        "code": req.code,
        "language": req.language,
        "createdAt": now,
        "updatedAt": now,
    }
    return repo.code_snippets.insert(snippet)


@code_routes.get("/code-snippets")
def list_snippets(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> list[dict]:
    return repo.code_snippets.filter(owned_by(current_user.userId))


@code_routes.post("/code-snippets/shared", status_code=status.HTTP_201_CREATED, response_model=ShareCodeResponse)
def share_code(
    req: ShareCodeRequest,
    current_user: Optional[AuthTokenPayload] = Depends(get_optional_user),
    repo: Repository = Depends(get_repository),
) -> ShareCodeResponse:
    """Store code under a random id that anyone can read for seven days."""
    now = datetime.now(timezone.utc)
    shared = {
        "id": uuid_like(),
        "userId": current_user.userId if current_user else "anonymous",
        "code": req.code,
        "language": req.language,
        "createdAt": iso_format(now),
        "expiresAt": iso_format(shared_code_expiry(now)),
    }
    repo.shared_code.insert(shared)
    return ShareCodeResponse(id=shared["id"])


@code_routes.get("/code-snippets/shared/{share_id}")
def get_shared_code(share_id: str, repo: Repository = Depends(get_repository)) -> dict:
    shared = repo.shared_code.find(lambda c: c.get("id") == share_id)
    if shared is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shared code not found")
    expires_at = parse_iso(shared.get("expiresAt"))
    if expires_at is None or expires_at < datetime.now(timezone.utc):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shared code has expired")
    return shared

"""
Learning path endpoints.
"""

import copy
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from api.config import get_repository
from api.schemas.auth_schemas import AuthTokenPayload
from api.schemas.learning_path_schemas import CreateLearningPathRequest, LearningPathProgressRequest
from api.schemas.user_course_schemas import MessageResponse
from api.services.learning_path_service import apply_course_progress, merge_updates, new_learning_path
from api.storage import Repository, owned_by
from api.utils.auth import get_current_user

learning_path_routes = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Learning path not found")


@learning_path_routes.get("")
def list_learning_paths(
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> list[dict]:
    return repo.learning_paths.filter(owned_by(current_user.userId))


@learning_path_routes.post("", status_code=status.HTTP_201_CREATED)
def create_learning_path(
    req: CreateLearningPathRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    name = req.name.strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid learning path data")
    path = new_learning_path(current_user.userId, name, req.courses, req.description, req.difficulty)
    return repo.learning_paths.insert(path)


@learning_path_routes.get("/{path_id}")
def get_learning_path(
    path_id: str,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    path = repo.learning_paths.find(owned_by(current_user.userId, path_id))
    if path is None:
        raise _not_found()
    return path


@learning_path_routes.put("/{path_id}")
def update_learning_path(
    path_id: str,
    updates: dict[str, Any] = Body(...),
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    """Shallow merge; id, userId and createdAt cannot be changed."""
    match = owned_by(current_user.userId, path_id)
    with repo.learning_paths.transaction() as paths:
        path = next((p for p in paths if match(p)), None)
        if path is None:
            raise _not_found()
        try:
            merge_updates(path, updates)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return copy.deepcopy(path)


@learning_path_routes.put("/{path_id}/progress")
def update_learning_path_progress(
    path_id: str,
    req: LearningPathProgressRequest,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> dict:
    match = owned_by(current_user.userId, path_id)
    with repo.learning_paths.transaction() as paths:
        path = next((p for p in paths if match(p)), None)
        if path is None:
            raise _not_found()
        try:
            apply_course_progress(path, req.courseIndex, req.completed)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return copy.deepcopy(path)


@learning_path_routes.delete("/{path_id}", response_model=MessageResponse)
def delete_learning_path(
    path_id: str,
    current_user: AuthTokenPayload = Depends(get_current_user),
    repo: Repository = Depends(get_repository),
) -> MessageResponse:
    if repo.learning_paths.delete_where(owned_by(current_user.userId, path_id)) is None:
        raise _not_found()
    return MessageResponse(message="Learning path deleted successfully")

"""User CRUD routes.

Endpoints:
- GET /users: List all users
- GET /users/{id}: Get a user
- POST /users: Create a user
- PATCH /users/{id}: Partially update a user
- DELETE /users/{id}: Delete a user

Error bodies are plain text ("Not Found", "No id allowed", ...).
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse

from api.dependencies import get_user_repo
from api.models import UserResponse
from domain.model.errors import DuplicateError, NotFoundError, ValidationError
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _not_found() -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: Exception) -> PlainTextResponse:
    logger.warning("User request rejected", extra={"reason": str(exc)})
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


@router.get("", response_model=list[UserResponse])
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    """List all users."""
    return [UserResponse.from_domain(u) for u in user_service.list_users(repo)]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a user by ID."""
    try:
        user = user_service.get_user(repo, user_id)
    except NotFoundError:
        return _not_found()
    return UserResponse.from_domain(user)


@router.post("", response_model=UserResponse)
async def create_user(
    body: dict[str, Any] = Body(...),
    repo: UserRepository = Depends(get_user_repo),
):
    """Create a user. The ID is always generated by the server."""
    try:
        user = user_service.create_user(repo, body)
    except (ValidationError, DuplicateError) as e:
        return _bad_request(e)
    return UserResponse.from_domain(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: dict[str, Any] = Body(...),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update email and/or displayName of an existing user."""
    try:
        user = user_service.update_user(repo, user_id, body)
    except (ValidationError, DuplicateError) as e:
        return _bad_request(e)
    except NotFoundError:
        return _not_found()
    return UserResponse.from_domain(user)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Delete a user and return its state before deletion."""
    try:
        user = user_service.delete_user(repo, user_id)
    except NotFoundError:
        return _not_found()
    return UserResponse.from_domain(user)

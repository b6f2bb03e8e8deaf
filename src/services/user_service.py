"""User service: CRUD use cases for the users resource.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.

Create/update flow: reject identifier → parse body → unique email → persist
"""

import logging
from typing import Any

from domain.model.errors import NotFoundError
from domain.model.user import User, UserDraft
from port.user_repository import UserRepository
from services.user_validator import check_unique_email, reject_identifier_field

logger = logging.getLogger(__name__)


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()


def get_user(repo: UserRepository, user_id: str) -> User:
    """Raises NotFoundError if no user has ``user_id``."""
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("Not Found")
    return user


def create_user(repo: UserRepository, body: dict[str, Any]) -> User:
    """Create a user from a raw request body.

    Raises:
        IdentifierNotAllowedError: body contains an identifier key
        ValidationError: email or displayName missing or malformed
        DuplicateError: email already registered
    """
    reject_identifier_field(body)
    draft = UserDraft.from_body(body)
    check_unique_email(draft.email, None, repo)

    user = repo.create(email=draft.email, display_name=draft.display_name)

    logger.info("User created", extra={"userId": user.id, "email": user.email})
    return user


def update_user(repo: UserRepository, user_id: str, body: dict[str, Any]) -> User:
    """Merge provided fields onto an existing user.

    Raises:
        IdentifierNotAllowedError: body contains an identifier key
        ValidationError: a provided field is malformed
        DuplicateError: new email belongs to another user
        NotFoundError: no user has ``user_id``
    """
    reject_identifier_field(body)
    draft = UserDraft.from_body(body, partial=True)
    if draft.email is not None:
        check_unique_email(draft.email, user_id, repo)

    user = repo.update(user_id, draft.changes())
    if not user:
        raise NotFoundError("Not Found")

    logger.info("User updated", extra={"userId": user_id, "fields": sorted(draft.changes())})
    return user


def delete_user(repo: UserRepository, user_id: str) -> User:
    """Hard-delete a user and return its prior state.

    Raises NotFoundError if no user has ``user_id``.
    """
    user = repo.delete(user_id)
    if not user:
        raise NotFoundError("Not Found")

    logger.info("User deleted", extra={"userId": user_id})
    return user

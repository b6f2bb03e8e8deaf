"""User validation rules shared by the create and update paths."""

from typing import Any

from domain.model.errors import DuplicateError, IdentifierNotAllowedError
from domain.model.user import IDENTIFIER_FIELDS
from port.user_repository import UserRepository


def reject_identifier_field(body: dict[str, Any]) -> None:
    """Raise IdentifierNotAllowedError if the body carries any identifier key.

    Must run before any other validation.
    """
    for field in IDENTIFIER_FIELDS:
        if field in body:
            raise IdentifierNotAllowedError(field)


def check_unique_email(email: str, exclude_id: str | None, repo: UserRepository) -> None:
    """Raise DuplicateError if another user already owns ``email``.

    ``exclude_id`` is the user being updated, so keeping one's own email is allowed.
    Comparison is exact string equality.
    """
    existing = repo.get_by_email(email)
    if existing and existing.id != exclude_id:
        raise DuplicateError("Email already registered")

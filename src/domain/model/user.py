"""User domain models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from domain.model.errors import ValidationError

# Keys a caller may never send; the identifier is always assigned by the store.
IDENTIFIER_FIELDS = ('_id', 'id')


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    email: str
    display_name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserDraft:
    """Inbound user fields, each one optional until a use case requires it.

    Built from a raw JSON body with ``from_body``. Unknown keys are dropped.
    """
    email: str | None = None
    display_name: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any], partial: bool = False) -> 'UserDraft':
        """Parse a request body.

        With ``partial=False`` both fields are required (create).
        With ``partial=True`` any subset is accepted (update).

        Raises:
            ValidationError: a field is missing, not a string, or blank
        """
        email = _read_field(body, 'email', required=not partial)
        display_name = _read_field(body, 'displayName', required=not partial)
        return cls(email=email, display_name=display_name)

    def changes(self) -> dict[str, str]:
        """Return only the fields that were provided."""
        fields = {'email': self.email, 'display_name': self.display_name}
        return {k: v for k, v in fields.items() if v is not None}


def _read_field(body: dict[str, Any], key: str, required: bool) -> str | None:
    if key not in body or body[key] is None:
        if required:
            raise ValidationError(f"{key} is required")
        return None

    value = body[key]
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    if not value.strip():
        raise ValidationError(f"{key} must not be blank")
    return value

from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations store records keyed by id. Email uniqueness is a
    service-level rule; a repository is not required to enforce it.
    """
    def create(self, email: str, display_name: str) -> User:
        """Insert a new user with a freshly generated id and return it."""
        ...

    def list_all(self) -> list[User]:
        """Return every stored user in store-defined order."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by exact email. Return User or None if not found."""
        ...

    def update(self, user_id: str, changes: dict[str, str]) -> User | None:
        """Apply field changes to a user. Return the updated User or None if not found."""
        ...

    def delete(self, user_id: str) -> User | None:
        """Hard-delete a user. Return its state before deletion or None if not found."""
        ...

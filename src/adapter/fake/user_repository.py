"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, email: str, display_name: str) -> User:
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            email=email,
            display_name=display_name,
            created_at=now,
            updated_at=now,
        )
        self.store[user_id] = user
        return replace(user)

    def update(self, user_id: str, changes: dict[str, str]) -> User | None:
        user = self.store.get(user_id)
        if not user:
            return None

        updated = replace(user, **changes, updated_at=datetime.now(timezone.utc))
        self.store[user_id] = updated
        return replace(updated)

    def delete(self, user_id: str) -> User | None:
        return self.store.pop(user_id, None)

    # ── read operations ──────────────────────────────────────

    def list_all(self) -> list[User]:
        return [replace(u) for u in self.store.values()]

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return replace(user) if user else None

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return replace(user)
        return None

"""In-memory user list. Nothing survives a restart."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from sample_api.exceptions import NotFoundError, ValidationError

log = logging.getLogger(__name__)


class User(BaseModel):
    # Stored as received; only presence is checked.
    id: int
    name: Any
    email: Any


_SEED_USERS = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
)


def _is_missing(value: Any) -> bool:
    # Empty lists and objects count as present.
    if isinstance(value, (list, dict)):
        return False
    return not value


class UserStore:
    """Plain list of users, seeded with two demo entries."""

    def __init__(self, seed: bool = True) -> None:
        self._users: list[User] = []
        if seed:
            for name, email in _SEED_USERS:
                self._users.append(User(id=len(self._users) + 1, name=name, email=email))

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[User]:
        return list(self._users)

    def get(self, user_id: int) -> User:
        for user in self._users:
            if user.id == user_id:
                return user
        raise NotFoundError("User not found")

    def create(self, name: Any, email: Any) -> User:
        """Append a user. Both fields must be present and non-empty; values are not type-checked."""
        if _is_missing(name) or _is_missing(email):
            raise ValidationError("Name and email are required")
        user = User(id=len(self._users) + 1, name=name, email=email)
        self._users.append(user)
        log.info("New user created: %s (%s)", name, email)
        return user

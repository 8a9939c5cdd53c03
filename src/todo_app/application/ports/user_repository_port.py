"""Port for user persistence operations used by account services."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from todo_app.application.dto.todo_models import UserModel


class UserRepositoryPort(Protocol):
    """User repository contract."""

    def load(self, *, user_id: UUID) -> list[UserModel]:
        """Return the users stored under one user id, or an empty list."""

    def save(self, *, user_id: UUID, users: list[UserModel]) -> None:
        """Replace the users stored under one user id."""

    def get_by_id(self, *, user_id: UUID) -> UserModel | None:
        """Return the user stored under one user id or None."""

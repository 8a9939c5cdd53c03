"""Port for per-user task persistence."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from todo_app.application.dto.todo_models import TaskModel


class TaskRepositoryPort(Protocol):
    """Task repository contract."""

    def load(self, *, user_id: UUID) -> list[TaskModel]:
        """Return stored tasks for one user, or an empty list when unavailable."""

    def save(self, *, user_id: UUID, tasks: list[TaskModel]) -> None:
        """Replace stored tasks for one user."""

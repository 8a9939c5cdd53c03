"""Application service for one user's todo tasks."""

from __future__ import annotations

import logging
from uuid import UUID

from todo_app.application.dto.todo_models import TaskModel, UserModel
from todo_app.application.ports.task_repository_port import TaskRepositoryPort
from todo_app.application.ports.user_repository_port import UserRepositoryPort

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when a task operation targets a user that is not stored."""

    def __init__(self, *, user_id: UUID) -> None:
        super().__init__(f"user not found: {user_id}")
        self.user_id = user_id


class TaskService:
    """Append and list tasks, keeping the user record and task file in step."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        tasks: TaskRepositoryPort,
    ) -> None:
        self._users = users
        self._tasks = tasks

    def add_task(self, *, user_id: UUID, task: TaskModel) -> TaskModel:
        user = self._require_existing_user(user_id=user_id)

        user.add_task(task)
        self._users.save(user_id=user.id, users=[user])
        self._tasks.save(user_id=user.id, tasks=list(user.tasks))
        logger.info("task_added user_id=%s task_id=%s", user.id, task.id)
        return task

    def list_tasks(self, *, user_id: UUID) -> list[TaskModel]:
        """Return the user's tasks in insertion order."""

        self._require_existing_user(user_id=user_id)
        return self._tasks.load(user_id=user_id)

    def _require_existing_user(self, *, user_id: UUID) -> UserModel:
        user = self._users.get_by_id(user_id=user_id)
        if user is None:
            raise UserNotFoundError(user_id=user_id)
        return user

"""Per-user JSON file adapters for task and user records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from todo_app.application.dto.todo_models import (
    TaskListAdapter,
    TaskModel,
    UserListAdapter,
    UserModel,
)
from todo_app.application.ports.task_repository_port import TaskRepositoryPort
from todo_app.application.ports.user_repository_port import UserRepositoryPort

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", TaskModel, UserModel)


class _JsonListStore(Generic[RecordT]):
    """Read and write one JSON array of records per user id."""

    def __init__(
        self,
        *,
        directory: Path,
        adapter: TypeAdapter[list[RecordT]],
        kind: str,
    ) -> None:
        self._directory = directory
        self._adapter = adapter
        self._kind = kind

    def path_for(self, user_id: UUID) -> Path:
        return self._directory / f"{user_id}.json"

    def read(self, user_id: UUID) -> list[RecordT]:
        path = self.path_for(user_id)
        if not path.exists():
            logger.info("%s_file_missing user_id=%s path=%s", self._kind, user_id, path)
            return []
        try:
            return self._adapter.validate_json(path.read_bytes())
        except (OSError, ValidationError) as error:
            logger.warning(
                "%s_file_unreadable user_id=%s path=%s error=%s",
                self._kind,
                user_id,
                path,
                error,
            )
            return []

    def write(self, user_id: UUID, records: list[RecordT]) -> None:
        path = self.path_for(user_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self._adapter.dump_json(records, indent=2))
        logger.info("%s_file_saved user_id=%s count=%s", self._kind, user_id, len(records))


class JsonTaskRepository(TaskRepositoryPort):
    """Task repository storing `<data_dir>/tasks/<user_id>.json`."""

    def __init__(self, data_dir: Path | str) -> None:
        self._store = _JsonListStore(
            directory=Path(data_dir) / "tasks",
            adapter=TaskListAdapter,
            kind="tasks",
        )

    def load(self, *, user_id: UUID) -> list[TaskModel]:
        return self._store.read(user_id)

    def save(self, *, user_id: UUID, tasks: list[TaskModel]) -> None:
        self._store.write(user_id, tasks)


class JsonUserRepository(UserRepositoryPort):
    """User repository storing `<data_dir>/users/<user_id>.json`."""

    def __init__(self, data_dir: Path | str) -> None:
        self._store = _JsonListStore(
            directory=Path(data_dir) / "users",
            adapter=UserListAdapter,
            kind="users",
        )

    def load(self, *, user_id: UUID) -> list[UserModel]:
        return self._store.read(user_id)

    def save(self, *, user_id: UUID, users: list[UserModel]) -> None:
        self._store.write(user_id, users)

    def get_by_id(self, *, user_id: UUID) -> UserModel | None:
        """Return the stored user whose id matches, ignoring unrelated entries."""

        for user in self.load(user_id=user_id):
            if user.id == user_id:
                return user
        return None

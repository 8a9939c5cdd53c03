"""Pydantic models for persisted todo records."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class TaskModel(StrictModel):
    """One todo item as stored in a user's task file."""

    id: UUID = Field(default_factory=uuid4)
    title: str | None = None
    description: str | None = None
    status: str | None = None
    created_at: datetime | None = None
    due_date: datetime | None = None
    priority: int = 0
    tags: list[str] | None = None


class UserModel(StrictModel):
    """Account record; `password` always holds credential text, never plaintext."""

    id: UUID = Field(default_factory=uuid4)
    username: str | None = None
    password: str | None = None
    tasks: list[TaskModel] = Field(default_factory=list)

    def add_task(self, task: TaskModel) -> None:
        """Append one task at the tail of the user's task queue."""

        self.tasks.append(task)

    def __str__(self) -> str:
        titles = [task.title for task in self.tasks]
        return f"{self.username} ({self.id}){titles}"


TaskListAdapter = TypeAdapter(list[TaskModel])
UserListAdapter = TypeAdapter(list[UserModel])

"""Composition of todo services from runtime settings."""

from __future__ import annotations

from dataclasses import dataclass

from todo_app.application.ports.random_source_port import RandomSourcePort
from todo_app.application.services.auth_service import AuthService
from todo_app.application.services.task_service import TaskService
from todo_app.config.settings import Settings
from todo_app.infrastructure.security.password_hasher import build_password_hasher
from todo_app.infrastructure.security.random_source import SecretsRandomSource
from todo_app.infrastructure.security.token_service import SessionTokenService
from todo_app.infrastructure.storage.json_repository import (
    JsonTaskRepository,
    JsonUserRepository,
)


@dataclass(frozen=True)
class TodoServices:
    """Application services sharing one set of repositories and adapters."""

    auth: AuthService
    tasks: TaskService


def build_services(
    *,
    settings: Settings,
    random_source: RandomSourcePort | None = None,
) -> TodoServices:
    """Compose services backed by per-user JSON files under `settings.data_dir`."""

    source = random_source or SecretsRandomSource()
    users = JsonUserRepository(settings.data_dir)
    auth = AuthService(
        users=users,
        password_hasher=build_password_hasher(
            scheme=settings.password_hash_scheme,
            random_source=source,
        ),
        session_tokens=SessionTokenService(random_source=source),
    )
    tasks = TaskService(users=users, tasks=JsonTaskRepository(settings.data_dir))
    return TodoServices(auth=auth, tasks=tasks)

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from uuid import uuid4

import pytest

from todo_app.application.dto.todo_models import TaskModel, UserModel
from todo_app.infrastructure.storage.json_repository import (
    JsonTaskRepository,
    JsonUserRepository,
)


def test_task_repository_saves_pretty_json_array_and_loads_it_back(tmp_path: Path) -> None:
    repository = JsonTaskRepository(tmp_path)
    user_id = uuid4()
    tasks = [
        TaskModel(
            title="Implement secure authentication",
            status="in-progress",
            created_at=datetime(2026, 10, 18, 12, 0),
            priority=1,
            tags=["security", "authentication", "important"],
        ),
        TaskModel(title="Write docs"),
    ]

    repository.save(user_id=user_id, tasks=tasks)

    path = tmp_path / "tasks" / f"{user_id}.json"
    raw = path.read_text(encoding="utf-8")
    assert raw.startswith("[\n")
    assert json.loads(raw)[0]["created_at"] == "2026-10-18T12:00:00"
    assert repository.load(user_id=user_id) == tasks


def test_missing_task_file_loads_empty_list(tmp_path: Path) -> None:
    repository = JsonTaskRepository(tmp_path / "does-not-exist")

    assert repository.load(user_id=uuid4()) == []


def test_corrupt_task_file_loads_empty_list_and_warns(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    user_id = uuid4()
    path = tmp_path / "tasks" / f"{user_id}.json"
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        tasks = JsonTaskRepository(tmp_path).load(user_id=user_id)

    assert tasks == []
    assert "tasks_file_unreadable" in caplog.text


def test_non_utf8_task_file_loads_empty_list_and_warns(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    user_id = uuid4()
    path = tmp_path / "tasks" / f"{user_id}.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"[\xff\xfe]")

    with caplog.at_level(logging.WARNING):
        tasks = JsonTaskRepository(tmp_path).load(user_id=user_id)

    assert tasks == []
    assert "tasks_file_unreadable" in caplog.text


def test_non_utf8_user_file_is_treated_as_unknown_user(tmp_path: Path) -> None:
    user_id = uuid4()
    path = tmp_path / "users" / f"{user_id}.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"[\xff\xfe]")

    assert JsonUserRepository(tmp_path).get_by_id(user_id=user_id) is None


def test_save_failure_propagates(tmp_path: Path) -> None:
    blocker = tmp_path / "tasks"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        JsonTaskRepository(tmp_path).save(user_id=uuid4(), tasks=[TaskModel(title="x")])


def test_user_repository_creates_directories_and_finds_user_by_id(tmp_path: Path) -> None:
    repository = JsonUserRepository(tmp_path / "nested")
    user = UserModel(username="username", password="credential-text")
    user.add_task(TaskModel(title="first"))

    repository.save(user_id=user.id, users=[user])

    assert (tmp_path / "nested" / "users" / f"{user.id}.json").is_file()
    loaded = repository.get_by_id(user_id=user.id)
    assert loaded == user
    assert loaded is not None and loaded.tasks[0].title == "first"
    assert repository.get_by_id(user_id=uuid4()) is None


def test_user_file_with_wrong_shape_loads_empty_list(tmp_path: Path) -> None:
    user_id = uuid4()
    path = tmp_path / "users" / f"{user_id}.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"id": str(user_id)}), encoding="utf-8")

    assert JsonUserRepository(tmp_path).load(user_id=user_id) == []

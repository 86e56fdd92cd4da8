# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdesk.core.state import AppState
from taskdesk.core.sync import TaskViewSync
from taskdesk.tasks.task_models import Priority, Status, Task

from .fakes import FakeTaskStore, make_task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdesk-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        api_base_url="http://tasks.test/api/tasks",
        connect_timeout_seconds=1.0,
        read_timeout_seconds=1.0,
        write_timeout_seconds=1.0,
        default_filter="all",
        default_sort="priority",
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        make_task(1, "Write report", Priority.LOW, Status.PENDING),
        make_task(2, "Pay rent", Priority.HIGH, Status.COMPLETED),
        make_task(3, "Call plumber", Priority.MEDIUM, Status.PENDING),
        make_task(4, "Book flights", Priority.HIGH, Status.PENDING),
        make_task(5, "Water plants", Priority.LOW, Status.COMPLETED),
    ]


@pytest.fixture()
def store(sample_tasks: list[Task]) -> FakeTaskStore:
    return FakeTaskStore(sample_tasks)


@pytest.fixture()
def sync(store: FakeTaskStore) -> TaskViewSync:
    return TaskViewSync(store)


@pytest.fixture()
def state(settings: SimpleNamespace, store: FakeTaskStore, sync: TaskViewSync) -> AppState:
    """AppState wired with the in-memory store (no network)."""
    return AppState(settings=settings, store=store, sync=sync)

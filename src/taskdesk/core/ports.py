# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The synchronizer depends on a Protocol instead of the HTTP adapter.
This keeps the Task Store swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskFields


class RequestFailed(RuntimeError):
    """
    Any failed Task Store call: transport error, non-2xx status, malformed body.

    Callers do not branch on the cause; `reason` is kept for logs only.
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class TaskStore(Protocol):
    """Remote task persistence (list/get/create/update/delete keyed by id)."""

    async def list_tasks(self) -> list[Task]: ...
    async def get_task(self, task_id: int) -> Task: ...
    async def create_task(self, fields: TaskFields) -> None: ...
    async def update_task(self, task: Task) -> None: ...
    async def delete_task(self, task_id: int) -> None: ...

# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        """Accept the wire value or any casing of it ("high", "HIGH")."""
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"unknown priority: {raw!r}")


class Status(StrEnum):
    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: Any) -> Status:
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"unknown status: {raw!r}")

    def flipped(self) -> Status:
        return Status.COMPLETED if self is Status.PENDING else Status.PENDING


class ViewFilter(StrEnum):
    ALL = "all"
    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: Any) -> ViewFilter:
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"unknown filter: {raw!r}")


class SortKey(StrEnum):
    PRIORITY = "priority"
    STATUS = "status"

    @classmethod
    def parse(cls, raw: Any) -> SortKey:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw or "").strip().lower())
        except ValueError:
            raise ValueError(f"unknown sort key: {raw!r}") from None


@dataclass(frozen=True, slots=True)
class TaskFields:
    """Everything about a task except its identifier (the create payload)."""

    title: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "status": self.status.value,
        }


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    status: Status

    @property
    def fields(self) -> TaskFields:
        return TaskFields(
            title=self.title,
            description=self.description,
            priority=self.priority,
            status=self.status,
        )

    @classmethod
    def from_fields(cls, task_id: int, fields: TaskFields) -> Task:
        return cls(
            id=int(task_id),
            title=fields.title,
            description=fields.description,
            priority=fields.priority,
            status=fields.status,
        )

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields.to_payload()}


def task_from_api(raw: Any) -> Task:
    """
    Decode one task object as returned by the Task Store.

    The identifier may arrive as "id" or "_id" (document-store backends).
    Raises ValueError for anything that does not look like a task.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"task must be an object, got {type(raw).__name__}")

    raw_id = raw.get("id", raw.get("_id"))
    if raw_id is None or isinstance(raw_id, bool):
        raise ValueError("task has no identifier")
    if isinstance(raw_id, float) and not raw_id.is_integer():
        raise ValueError(f"task identifier is not an integer: {raw_id!r}")
    try:
        task_id = int(raw_id)
    except (TypeError, ValueError):
        raise ValueError(f"task identifier is not an integer: {raw_id!r}") from None

    title = raw.get("title")
    if not isinstance(title, str):
        raise ValueError(f"task {task_id} has no title")

    description = raw.get("description")
    if description is None:
        description = ""

    return Task(
        id=task_id,
        title=title,
        description=str(description),
        priority=Priority.parse(raw.get("priority")),
        status=Status.parse(raw.get("status")),
    )


def tasks_from_api(raw: Any) -> list[Task]:
    if not isinstance(raw, list):
        raise ValueError(f"task list must be an array, got {type(raw).__name__}")
    return [task_from_api(item) for item in raw]


# ---- Draft (the editor's working copy) ----


@dataclass(frozen=True, slots=True)
class NewDraft:
    """A task that does not exist in the store yet."""

    fields: TaskFields = field(default_factory=TaskFields)


@dataclass(frozen=True, slots=True)
class EditingDraft:
    """A copy of an existing task being edited."""

    id: int
    fields: TaskFields


Draft = NewDraft | EditingDraft


def empty_draft() -> NewDraft:
    return NewDraft()


def draft_from_task(task: Task) -> EditingDraft:
    return EditingDraft(id=task.id, fields=task.fields)


def with_draft_changes(draft: Draft, **changes: Any) -> Draft:
    """
    Return a copy of the draft with some fields replaced (form binding).

    Unknown field names and bad priority/status values raise ValueError.
    """
    allowed = {"title", "description", "priority", "status"}
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"unknown draft field(s): {', '.join(sorted(unknown))}")

    clean: dict[str, Any] = {}
    for name, value in changes.items():
        if name == "priority":
            clean[name] = Priority.parse(value)
        elif name == "status":
            clean[name] = Status.parse(value)
        else:
            clean[name] = "" if value is None else str(value)

    return replace(draft, fields=replace(draft.fields, **clean))


@dataclass(frozen=True, slots=True)
class ViewSelection:
    filter: ViewFilter = ViewFilter.ALL
    sort_key: SortKey = SortKey.PRIORITY

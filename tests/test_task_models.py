# tests/test_task_models.py

from __future__ import annotations

import pytest

from taskdesk.tasks.task_models import (
    EditingDraft,
    NewDraft,
    Priority,
    Status,
    TaskFields,
    task_from_api,
    with_draft_changes,
)


def test_parse_is_case_insensitive() -> None:
    assert Priority.parse("high") is Priority.HIGH
    assert Status.parse(" COMPLETED ") is Status.COMPLETED
    with pytest.raises(ValueError):
        Priority.parse("urgent")


def test_status_flip() -> None:
    assert Status.PENDING.flipped() is Status.COMPLETED
    assert Status.COMPLETED.flipped() is Status.PENDING


def test_task_from_api_defaults_missing_description() -> None:
    task = task_from_api({"_id": "12", "title": "t", "priority": "Medium", "status": "Pending", "description": None})
    assert task.id == 12
    assert task.description == ""



def test_task_from_api_accepts_whole_float_id() -> None:
    task = task_from_api({"id": 2.0, "title": "t", "priority": "Low", "status": "Pending"})
    assert task.id == 2

@pytest.mark.parametrize(
    "raw",
    [
        "not a dict",
        {"title": "no id", "priority": "Low", "status": "Pending"},
        {"id": True, "title": "bool id", "priority": "Low", "status": "Pending"},
        {"id": 1.9, "title": "fractional id", "priority": "Low", "status": "Pending"},
        {"id": 1, "priority": "Low", "status": "Pending"},
        {"id": 1, "title": "t", "priority": "Low", "status": "Done"},
    ],
)
def test_task_from_api_rejects_malformed(raw) -> None:
    with pytest.raises(ValueError):
        task_from_api(raw)


def test_draft_changes_keep_the_tag() -> None:
    new = with_draft_changes(NewDraft(), title="a", priority="low")
    assert isinstance(new, NewDraft)
    assert new.fields == TaskFields(title="a", priority=Priority.LOW)

    edit = with_draft_changes(EditingDraft(id=3, fields=TaskFields(title="b")), status="Completed")
    assert isinstance(edit, EditingDraft)
    assert edit.id == 3
    assert edit.fields.title == "b"


def test_draft_changes_reject_unknown_field() -> None:
    with pytest.raises(ValueError):
        with_draft_changes(NewDraft(), owner="me")

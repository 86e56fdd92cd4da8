# src/taskdesk/core/sync.py

"""
View-state synchronizer.

Owns everything the task screen shows:
- the canonical task list (replaced wholesale on every refresh),
- the view selection (filter + sort),
- the draft being edited and whether the editor is open,
- one error message and a loading flag.

Key invariants:
- the canonical list changes only through refresh(); mutations go to the store
  and are followed by a full re-fetch (the server is always trusted),
- at most one error message is held; the latest operation's outcome overwrites it,
- store failures never escape an operation, they become the error message,
- loading is True only while refresh() is awaiting the store.

There is no lock against overlapping calls. The console awaits each command
before reading the next line, other callers get no such guarantee.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..tasks.task_models import (
    Draft,
    EditingDraft,
    NewDraft,
    SortKey,
    Task,
    ViewFilter,
    ViewSelection,
    draft_from_task,
    empty_draft,
    with_draft_changes,
)
from .ports import RequestFailed, TaskStore
from .view import derive_view

logger = logging.getLogger(__name__)

MSG_FETCH_FAILED = "Failed to fetch tasks. Please try again later."
MSG_FETCH_ONE_FAILED = "Failed to fetch task details. Please try again."
MSG_SAVE_FAILED = "Failed to save task. Please try again."
MSG_DELETE_FAILED = "Failed to delete task. Please try again."
MSG_TOGGLE_FAILED = "Failed to update task status. Please try again."


class TaskViewSync:
    def __init__(self, store: TaskStore, *, selection: ViewSelection | None = None) -> None:
        self._store = store

        self.tasks: tuple[Task, ...] = ()
        self.selection: ViewSelection = selection or ViewSelection()
        self.draft: Draft = empty_draft()
        self.editor_open: bool = False
        self.error: str | None = None
        self.loading: bool = False

    # ---- reads ----

    def derived_view(self, selection: ViewSelection | None = None) -> list[Task]:
        return derive_view(self.tasks, selection or self.selection)

    def find_task(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    # ---- view selection (local only) ----

    def set_filter(self, value: ViewFilter | str) -> None:
        self.selection = ViewSelection(filter=ViewFilter.parse(value), sort_key=self.selection.sort_key)

    def set_sort(self, value: SortKey | str) -> None:
        self.selection = ViewSelection(filter=self.selection.filter, sort_key=SortKey.parse(value))

    # ---- store round trips ----

    async def refresh(self) -> None:
        self.loading = True
        try:
            tasks = await self._store.list_tasks()
        except RequestFailed as e:
            # Stale-on-error: keep showing what we had.
            logger.warning("refresh failed: %s", e)
            self.error = MSG_FETCH_FAILED
            return
        finally:
            self.loading = False

        self.tasks = tuple(tasks)
        self.error = None
        logger.debug("refresh: %d tasks", len(self.tasks))

    def begin_create(self) -> None:
        self.draft = empty_draft()
        self.editor_open = True

    async def begin_edit(self, task_id: int) -> None:
        try:
            task = await self._store.get_task(task_id)
        except RequestFailed as e:
            logger.warning("begin_edit(%s) failed: %s", task_id, e)
            self.error = MSG_FETCH_ONE_FAILED
            return

        self.draft = draft_from_task(task)
        self.editor_open = True
        self.error = None

    def update_draft(self, **changes: Any) -> None:
        self.draft = with_draft_changes(self.draft, **changes)

    def cancel(self) -> None:
        self.editor_open = False
        self.draft = empty_draft()

    async def submit(self, draft: Draft | None = None) -> None:
        """
        Save the draft: update when it carries an id, create otherwise.

        A blank (or whitespace-only) title is ignored without touching anything.
        """
        draft = self.draft if draft is None else draft
        if not draft.fields.title.strip():
            return

        self.draft = draft
        try:
            if isinstance(draft, EditingDraft):
                await self._store.update_task(Task.from_fields(draft.id, draft.fields))
                logger.info("Task %s updated", draft.id)
            elif isinstance(draft, NewDraft):
                await self._store.create_task(draft.fields)
                logger.info("Task created title=%r", draft.fields.title)
            else:
                raise TypeError(f"unsupported draft type: {type(draft).__name__}")
        except RequestFailed as e:
            # Editor stays open with the draft so the user can retry.
            logger.warning("submit failed: %s", e)
            self.error = MSG_SAVE_FAILED
            return

        self.editor_open = False
        self.draft = empty_draft()
        self.error = None
        await self.refresh()

    async def remove(self, task_id: int) -> None:
        try:
            await self._store.delete_task(task_id)
        except RequestFailed as e:
            logger.warning("remove(%s) failed: %s", task_id, e)
            self.error = MSG_DELETE_FAILED
            return

        logger.info("Task %s deleted", task_id)
        self.error = None
        await self.refresh()

    async def toggle_status(self, task_id: int) -> None:
        task = self.find_task(task_id)
        if task is None:
            return

        flipped = replace(task, status=task.status.flipped())
        try:
            await self._store.update_task(flipped)
        except RequestFailed as e:
            logger.warning("toggle_status(%s) failed: %s", task_id, e)
            self.error = MSG_TOGGLE_FAILED
            return

        logger.info("Task %s -> %s", task_id, flipped.status.value)
        self.error = None
        await self.refresh()

# src/taskdesk/core/view.py

"""
Derived view: what the list actually shows.

filter first, then a stable sort. Nothing here touches the inputs, so the
same (tasks, selection) always renders the same list.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Priority, SortKey, Task, ViewFilter, ViewSelection

_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


def priority_rank(priority: Priority) -> int:
    return _PRIORITY_RANK[priority]


def filter_tasks(tasks: Iterable[Task], view_filter: ViewFilter) -> list[Task]:
    if view_filter is ViewFilter.ALL:
        return list(tasks)
    return [t for t in tasks if t.status.value == view_filter.value]


def sort_tasks(tasks: Iterable[Task], sort_key: SortKey) -> list[Task]:
    if sort_key is SortKey.PRIORITY:
        # sorted() is stable: equal priorities keep their server order.
        return sorted(tasks, key=lambda t: priority_rank(t.priority))
    # "status" keeps the server order as-is.
    return list(tasks)


def derive_view(tasks: Iterable[Task], selection: ViewSelection) -> list[Task]:
    return sort_tasks(filter_tasks(tasks, selection.filter), selection.sort_key)

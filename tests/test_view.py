# tests/test_view.py

from __future__ import annotations

from taskdesk.core.view import derive_view, priority_rank
from taskdesk.tasks.task_models import (
    Priority,
    SortKey,
    Status,
    Task,
    ViewFilter,
    ViewSelection,
)

from .fakes import make_task


def test_derive_view_is_pure(sample_tasks: list[Task]) -> None:
    before = list(sample_tasks)
    sel = ViewSelection(filter=ViewFilter.PENDING, sort_key=SortKey.PRIORITY)

    first = derive_view(sample_tasks, sel)
    second = derive_view(sample_tasks, sel)

    assert first == second
    assert sample_tasks == before


def test_filters_partition_the_list(sample_tasks: list[Task]) -> None:
    pending = derive_view(sample_tasks, ViewSelection(filter=ViewFilter.PENDING))
    completed = derive_view(sample_tasks, ViewSelection(filter=ViewFilter.COMPLETED))
    everything = derive_view(sample_tasks, ViewSelection(filter=ViewFilter.ALL))

    assert all(t.status is Status.PENDING for t in pending)
    assert all(t.status is Status.COMPLETED for t in completed)
    assert {t.id for t in pending}.isdisjoint({t.id for t in completed})
    assert {t.id for t in pending} | {t.id for t in completed} == {t.id for t in sample_tasks}
    assert len(everything) == len(sample_tasks)


def test_priority_sort_orders_high_medium_low(sample_tasks: list[Task]) -> None:
    view = derive_view(sample_tasks, ViewSelection(sort_key=SortKey.PRIORITY))

    ranks = [priority_rank(t.priority) for t in view]
    assert all(a <= b for a, b in zip(ranks, ranks[1:]))
    # stable: among the two High tasks, server order (2 before 4) is kept
    assert [t.id for t in view] == [2, 4, 3, 1, 5]


def test_status_sort_keeps_server_order(sample_tasks: list[Task]) -> None:
    view = derive_view(sample_tasks, ViewSelection(sort_key=SortKey.STATUS))
    assert [t.id for t in view] == [1, 2, 3, 4, 5]


def test_filter_then_sort() -> None:
    tasks = [
        make_task(10, "a", Priority.LOW, Status.COMPLETED),
        make_task(11, "b", Priority.LOW, Status.PENDING),
        make_task(12, "c", Priority.HIGH, Status.PENDING),
    ]
    view = derive_view(tasks, ViewSelection(filter=ViewFilter.PENDING, sort_key=SortKey.PRIORITY))
    assert [t.id for t in view] == [12, 11]


def test_empty_list() -> None:
    assert derive_view([], ViewSelection()) == []

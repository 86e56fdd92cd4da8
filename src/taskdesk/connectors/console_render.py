# src/taskdesk/connectors/console_render.py

"""Plain-text rendering of the task screen (list, banner, editor)."""

from __future__ import annotations

from ..core.sync import TaskViewSync
from ..tasks.task_models import EditingDraft, Priority, Status, Task, ViewFilter

_PRIORITY_BADGE = {
    Priority.HIGH: "(!!!) High",
    Priority.MEDIUM: "(!!)  Medium",
    Priority.LOW: "(!)   Low",
}

_FILTER_LABEL = {
    ViewFilter.ALL: "All Tasks",
    ViewFilter.PENDING: "Pending",
    ViewFilter.COMPLETED: "Completed",
}


def _strike(text: str) -> str:
    # Combining long stroke overlay: works in most terminals, degrades to plain text.
    return "".join(ch + "\u0336" for ch in text)


def render_task_line(task: Task) -> str:
    done = task.status is Status.COMPLETED
    mark = "[x]" if done else "[ ]"
    title = _strike(task.title) if done else task.title
    line = f"{mark} #{task.id:<4} {_PRIORITY_BADGE[task.priority]:<12}  {title}"
    if task.description:
        line += f"\n            {task.description}"
    return line


def render_view(sync: TaskViewSync, *, app_name: str = "Task Manager") -> str:
    lines = [f"== {app_name} =="]

    if sync.error:
        lines.append(f"!! {sync.error}")

    if sync.loading:
        lines.append("... loading")

    sel = sync.selection
    lines.append(f"Filter: {_FILTER_LABEL[sel.filter]} | Sort by: {sel.sort_key.value}")

    view = sync.derived_view()
    if not view:
        lines.append("(no tasks)")
    else:
        lines.extend(render_task_line(t) for t in view)

    return "\n".join(lines)


def render_editor(sync: TaskViewSync) -> str:
    draft = sync.draft
    if isinstance(draft, EditingDraft):
        heading = f"Edit Task #{draft.id}"
        action = "/save to update the task"
    else:
        heading = "Add New Task"
        action = "/save to add the task"

    f = draft.fields
    return "\n".join(
        [
            f"-- {heading} --",
            f"  title:       {f.title}",
            f"  description: {f.description}",
            f"  priority:    {f.priority.value}",
            f"  status:      {f.status.value}",
            f"Use /set <field> <value> to change a field, {action}, /cancel to close.",
        ]
    )

# src/taskdesk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import cast

from ..connectors.console_render import render_editor, render_view
from ..core.state import AppState
from ..tasks.task_models import SortKey, ViewFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], Awaitable[str]]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], Awaitable[str]]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_DRAFT_FIELDS = ("title", "description", "priority", "status")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return await h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return await h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _screen(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskdesk"))
    out = render_view(state.sync, app_name=app_name)
    if state.sync.editor_open:
        out += "\n\n" + render_editor(state.sync)
    return out


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    return _screen(state)


async def cmd_refresh(
    state: AppState, args: list[str], emit: CommandEmitter | None = None
) -> str:
    if emit:
        emit("Loading tasks...")
    await state.sync.refresh()
    return _screen(state)


async def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add            -> open the editor with an empty task
    /add some title -> same, with the title pre-filled
    """
    state.sync.begin_create()
    if args:
        state.sync.update_draft(title=" ".join(args))
    return render_editor(state.sync)


async def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id>"
    await state.sync.begin_edit(task_id)
    return _screen(state)


async def cmd_set(state: AppState, args: list[str]) -> str:
    """
    /set title Buy milk
    /set description Two liters
    /set priority high|medium|low
    /set status pending|completed
    """
    if not state.sync.editor_open:
        return "No task is being edited. Use /add or /edit <id> first."
    if not args or args[0].lower() not in _DRAFT_FIELDS:
        return f"Usage: /set <{'|'.join(_DRAFT_FIELDS)}> <value>"

    field_name = args[0].lower()
    value = " ".join(args[1:])
    try:
        state.sync.update_draft(**{field_name: value})
    except ValueError as e:
        return f"Invalid value: {e}"
    return render_editor(state.sync)


async def cmd_save(state: AppState, args: list[str]) -> str:
    if not state.sync.editor_open:
        return "No task is being edited. Use /add or /edit <id> first."
    if not state.sync.draft.fields.title.strip():
        return "Title is required. Use /set title <text>."
    await state.sync.submit()
    return _screen(state)


async def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.sync.editor_open:
        return "Nothing to cancel."
    state.sync.cancel()
    return _screen(state)


async def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    await state.sync.remove(task_id)
    return _screen(state)


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    if state.sync.find_task(task_id) is None:
        return f"No task #{task_id} in the current list."
    await state.sync.toggle_status(task_id)
    return _screen(state)


async def cmd_filter(state: AppState, args: list[str]) -> str:
    choices = "|".join(f.value.lower() for f in ViewFilter)
    if not args:
        return f"Usage: /filter {choices}"
    try:
        state.sync.set_filter(args[0])
    except ValueError:
        return f"Usage: /filter {choices}"
    return _screen(state)


async def cmd_sort(state: AppState, args: list[str]) -> str:
    choices = "|".join(k.value for k in SortKey)
    if not args:
        return f"Usage: /sort {choices}"
    try:
        state.sync.set_sort(args[0])
    except ValueError:
        return f"Usage: /sort {choices}"
    return _screen(state)


async def cmd_status(state: AppState, args: list[str]) -> str:
    sync = state.sync
    api = getattr(state.settings, "api_base_url", "?")
    editor = "open" if sync.editor_open else "closed"
    return (
        "Status:\n"
        f"  Task Store: {api}\n"
        f"  Tasks loaded: {len(sync.tasks)}\n"
        f"  Filter / sort: {sync.selection.filter.value} / {sync.selection.sort_key.value}\n"
        f"  Editor: {editor}\n"
        f"  Last error: {sync.error or '-'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the Task Store.", aliases=["r"])
registry.register("add", cmd_add, help_text="Add a new task: /add [title].", aliases=["new"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id>.")
registry.register("set", cmd_set, help_text="Change a field of the task being edited: /set <field> <value>.")
registry.register("save", cmd_save, help_text="Save the task being edited.")
registry.register("cancel", cmd_cancel, help_text="Close the editor without saving.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("toggle", cmd_toggle, help_text="Toggle Pending/Completed: /toggle <id>.", aliases=["done"])
registry.register("filter", cmd_filter, help_text="Filter: /filter all | pending | completed.")
registry.register("sort", cmd_sort, help_text="Sort: /sort priority | status.")
registry.register("status", cmd_status, help_text="Show connection and view status.")

# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP Task Store and the synchronizer into AppState,
- closes the HTTP client on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.sync import TaskViewSync
from ..tasks.task_client import HttpTaskStore, make_timeout
from ..tasks.task_models import SortKey, ViewFilter, ViewSelection

logger = logging.getLogger(__name__)


def initial_selection(settings) -> ViewSelection:
    """View selection from settings; anything unparsable falls back to the defaults."""
    try:
        view_filter = ViewFilter.parse(getattr(settings, "default_filter", "all"))
    except ValueError:
        view_filter = ViewFilter.ALL
    try:
        sort_key = SortKey.parse(getattr(settings, "default_sort", "priority"))
    except ValueError:
        sort_key = SortKey.PRIORITY
    return ViewSelection(filter=view_filter, sort_key=sort_key)


def create_initial_state(*, settings=None, store=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if store is None:
        store = HttpTaskStore(
            settings.api_base_url,
            timeout=make_timeout(
                connect_s=settings.connect_timeout_seconds,
                read_s=settings.read_timeout_seconds,
                write_s=settings.write_timeout_seconds,
            ),
        )
        logger.info("Task Store: %s", settings.api_base_url)

    sync = TaskViewSync(store, selection=initial_selection(settings))
    return AppState(settings=settings, store=store, sync=sync)


async def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    aclose = getattr(state.store, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception:
        logger.debug("Task Store close failed.", exc_info=True)

# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskStore
from .sync import TaskViewSync


@dataclass
class AppState:
    # Settings live on the state for easy access from commands/connectors.
    settings: Any

    store: TaskStore
    sync: TaskViewSync

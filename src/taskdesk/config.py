# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- Bad values never crash startup: they fall back to defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKDESK"

DEFAULT_API_BASE_URL = "http://localhost:5000/api/tasks"

_FILTER_VALUES = {"all": "all", "pending": "Pending", "completed": "Completed"}
_SORT_VALUES = {"priority", "status"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: dict[str, str], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return choices.get(raw.strip().lower(), default)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Task Store HTTP API ----
    api_base_url: str
    connect_timeout_seconds: float
    read_timeout_seconds: float
    write_timeout_seconds: float

    # ---- Initial view selection ----
    default_filter: str
    default_sort: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdesk").strip() or "taskdesk"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdesk"))

        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).strip() or DEFAULT_API_BASE_URL
        # httpx joins relative paths onto the base; a trailing slash would double up.
        api_base_url = api_base_url.rstrip("/")

        connect_timeout_seconds = _env_float(_k("CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout_seconds = _env_float(_k("READ_TIMEOUT_SECONDS"), 15.0)
        write_timeout_seconds = _env_float(_k("WRITE_TIMEOUT_SECONDS"), 10.0)

        default_filter = _env_choice(_k("DEFAULT_FILTER"), _FILTER_VALUES, "all")
        default_sort = _env_choice(
            _k("DEFAULT_SORT"), {v: v for v in _SORT_VALUES}, "priority"
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            api_base_url=api_base_url,
            connect_timeout_seconds=connect_timeout_seconds,
            read_timeout_seconds=read_timeout_seconds,
            write_timeout_seconds=write_timeout_seconds,
            default_filter=default_filter,
            default_sort=default_sort,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

# src/taskdesk/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskdesk.log"

# Failures from these loggers already reach the user as the error banner.
_BANNER_LOGGERS = ("taskdesk.core.sync",)


def resolve_level(level: str | int) -> int:
    """Map "debug"/"INFO"/20 to a logging level; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


class _ConsoleFilter(logging.Filter):
    """
    Keep the REPL readable (the file handler still gets everything):
    - synchronizer failures only at ERROR+, the banner already shows them
    - httpx request lines ("HTTP Request: GET ... 200 OK") only at WARNING+
    - other third-party loggers only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith(_BANNER_LOGGERS):
            return record.levelno >= logging.ERROR

        if name.startswith("taskdesk."):
            return True

        if name == "httpx" or name.startswith("httpx."):
            return record.levelno >= logging.WARNING

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskdesk",
    level: str | int = "INFO",
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging once, before the first log call.

    `level` is the console level (usually Settings.log_level). Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(level))
    console.setFormatter(fmt)
    console.addFilter(_ConsoleFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # httpx request lines are useful in the file; httpcore's connection chatter is not.
    logging.getLogger("httpx").setLevel(logging.INFO)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.captureWarnings(True)
    return log_file

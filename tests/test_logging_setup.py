# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskdesk.logging_setup import _ConsoleFilter, resolve_level, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    httpx_level = logging.getLogger("httpx").level
    httpcore_level = logging.getLogger("httpcore").level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
    logging.getLogger("httpcore").setLevel(httpcore_level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("chatty") == logging.INFO


def test_console_filter_hides_banner_failures_and_request_lines() -> None:
    f = _ConsoleFilter()

    # sync failures are already rendered as the error banner
    assert not f.filter(_record("taskdesk.core.sync", logging.WARNING))
    assert f.filter(_record("taskdesk.core.sync", logging.ERROR))

    assert f.filter(_record("taskdesk.cli.main", logging.INFO))

    # "HTTP Request: GET ... 200 OK"
    assert not f.filter(_record("httpx", logging.INFO))
    assert f.filter(_record("httpx", logging.WARNING))

    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))


def test_setup_logging_uses_settings_level_and_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", level="warning")

    root = restore_root_logging
    assert log_file == tmp_path / "logs" / "taskdesk.log"
    assert log_file.exists()

    console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    files = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(console) == 1 and len(files) == 1
    assert console[0].level == logging.WARNING
    assert files[0].level == logging.DEBUG

    assert logging.getLogger("httpx").level == logging.INFO
    assert logging.getLogger("httpcore").level == logging.WARNING

    logging.getLogger("taskdesk.test").debug("into the file only")
    files[0].flush()
    assert "into the file only" in log_file.read_text("utf-8")


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, level="INFO")
    setup_logging(log_dir=tmp_path, level="INFO")
    assert len(restore_root_logging.handlers) == 2

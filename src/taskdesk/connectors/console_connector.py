# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .console_render import render_view

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def _read_line(prompt: str) -> str:
    """
    Read one line without blocking the event loop.

    input() runs in a daemon thread of its own, not the loop's executor, so a
    read still parked in input() never holds up shutdown after Ctrl+C.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(line: str | None, exc: BaseException | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(line or "")

    def _worker() -> None:
        try:
            line = input(prompt)
        except Exception as e:
            result: tuple[str | None, BaseException | None] = (None, e)
        else:
            result = (line, None)
        # The loop may already be closed if the app quit while we were waiting.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_deliver, *result)

    threading.Thread(target=_worker, name="console-input", daemon=True).start()
    return await fut


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "taskdesk"))

    def emit(text: str) -> None:
        # Immediate user-visible feedback for long operations (e.g., loading)
        print(f"[{_ts_local()}] {text}", flush=True)

    emit("Loading tasks...")
    await state.sync.refresh()
    print(render_view(state.sync, app_name=app_name))
    _print_ts("Type /help for commands. Use /exit to quit.\n")

    while True:
        prompt = "edit> " if state.sync.editor_open else "tasks> "
        try:
            user_input = (await _read_line(prompt)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console interrupted, exiting.")
            print()
            break
        except asyncio.CancelledError:
            # asyncio.run() turns Ctrl+C into cancelling the main task.
            logger.info("Console cancelled, exiting.")
            print()
            raise

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = await command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."

        print(response)
        print()

    logger.info("Console connector finished.")

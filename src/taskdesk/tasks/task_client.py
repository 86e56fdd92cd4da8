# src/taskdesk/tasks/task_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import RequestFailed
from .task_models import Task, TaskFields, task_from_api, tasks_from_api

logger = logging.getLogger(__name__)


def make_timeout(connect_s: float, read_s: float, write_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=write_s,
        pool=connect_s,
    )


class HttpTaskStore:
    """
    Task Store client over the REST API.

    Routes (relative to the base URL, e.g. http://localhost:5000/api/tasks):
      GET    /             -> list of tasks
      GET    /{id}         -> one task
      POST   /add          -> create (body without id)
      PUT    /edit/{id}    -> update (full task)
      DELETE /delete/{id}  -> delete

    Every failure (network, non-2xx, unparsable body) becomes RequestFailed.
    No retries: the caller shows an error and the user decides.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: httpx.Timeout | float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpTaskStore:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---- low-level helpers ----

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s %s", operation, method, path)
        try:
            resp = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            raise RequestFailed(operation, f"{e.__class__.__name__}: {e}") from e

        if not resp.is_success:
            raise RequestFailed(operation, f"HTTP {resp.status_code}")
        return resp

    @staticmethod
    def _json(operation: str, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise RequestFailed(operation, "response is not valid JSON") from e

    # ---- public API ----

    async def list_tasks(self) -> list[Task]:
        resp = await self._request("list_tasks", "GET", "/")
        data = self._json("list_tasks", resp)
        try:
            tasks = tasks_from_api(data)
        except ValueError as e:
            raise RequestFailed("list_tasks", f"malformed response: {e}") from e
        logger.debug("list_tasks -> %d tasks", len(tasks))
        return tasks

    async def get_task(self, task_id: int) -> Task:
        resp = await self._request("get_task", "GET", f"/{int(task_id)}")
        data = self._json("get_task", resp)
        try:
            return task_from_api(data)
        except ValueError as e:
            raise RequestFailed("get_task", f"malformed response: {e}") from e

    async def create_task(self, fields: TaskFields) -> None:
        # The created record in the response body is not needed: the caller re-fetches.
        await self._request("create_task", "POST", "/add", payload=fields.to_payload())

    async def update_task(self, task: Task) -> None:
        await self._request(
            "update_task", "PUT", f"/edit/{int(task.id)}", payload=task.to_payload()
        )

    async def delete_task(self, task_id: int) -> None:
        await self._request("delete_task", "DELETE", f"/delete/{int(task_id)}")

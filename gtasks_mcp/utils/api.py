"""HTTP client for the Google Tasks REST API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from gtasks_mcp.config import MAX_TASK_RESULTS, Settings
from gtasks_mcp.errors import RemoteCallError

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    # '@default' must reach the API unescaped
    return quote(value, safe="@")


def _describe_error(response: httpx.Response) -> str:
    """Pull the human-readable message out of a Google API error body."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return f"{response.status_code} {error['message']}"
        if isinstance(error, str):
            return f"{response.status_code} {error}"

    text = response.text.strip()
    return f"{response.status_code} {text or response.reason_phrase}"


class TasksClient:
    """
    Thin async wrapper over the Google Tasks v1 API.

    Every method issues exactly one HTTP request and returns the decoded JSON
    body (an empty dict for bodiless responses). Any failure is raised as
    RemoteCallError; nothing is retried.
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str = "https://tasks.googleapis.com/tasks/v1",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        if http_client is None:
            headers = {"Authorization": f"Bearer {access_token}"} if access_token else {}
            http_client = httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)
        self._http = http_client

    @classmethod
    def from_settings(cls, settings: Settings) -> TasksClient:
        return cls(
            access_token=settings.resolve_access_token(),
            base_url=settings.api_base_url,
            timeout=settings.timeout,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("%s %s %s", method, path, query)
        try:
            response = await self._http.request(method, path, params=query, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteCallError(_describe_error(e.response), status_code=e.response.status_code) from e
        except httpx.TimeoutException as e:
            raise RemoteCallError(f"Request timed out after {self._timeout:g} seconds") from e
        except httpx.HTTPError as e:
            raise RemoteCallError(f"{type(e).__name__}: {e}") from e

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise RemoteCallError(f"Failed to parse API response - {e}") from e
        return data if isinstance(data, dict) else {}

    # ------------------------------------------------------------------
    # Task lists
    # ------------------------------------------------------------------

    async def list_task_lists(self, max_results: int = MAX_TASK_RESULTS, page_token: str | None = None) -> dict[str, Any]:
        return await self._request(
            "GET", "/users/@me/lists", params={"maxResults": max_results, "pageToken": page_token}
        )

    async def insert_task_list(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/users/@me/lists", body=body)

    async def update_task_list(self, task_list_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/users/@me/lists/{_segment(task_list_id)}", body=body)

    async def delete_task_list(self, task_list_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/users/@me/lists/{_segment(task_list_id)}")

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def list_tasks(
        self,
        task_list_id: str,
        max_results: int = MAX_TASK_RESULTS,
        page_token: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/lists/{_segment(task_list_id)}/tasks",
            params={"maxResults": max_results, "pageToken": page_token},
        )

    async def get_task(self, task_list_id: str, task_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/lists/{_segment(task_list_id)}/tasks/{_segment(task_id)}")

    async def insert_task(
        self,
        task_list_id: str,
        body: dict[str, Any],
        parent: str | None = None,
    ) -> dict[str, Any]:
        # The API rejects 'parent' inside the body; it only goes in the query
        return await self._request(
            "POST", f"/lists/{_segment(task_list_id)}/tasks", params={"parent": parent}, body=body
        )

    async def update_task(self, task_list_id: str, task_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/lists/{_segment(task_list_id)}/tasks/{_segment(task_id)}", body=body)

    async def patch_task(self, task_list_id: str, task_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PATCH", f"/lists/{_segment(task_list_id)}/tasks/{_segment(task_id)}", body=body)

    async def delete_task(self, task_list_id: str, task_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/lists/{_segment(task_list_id)}/tasks/{_segment(task_id)}")

    async def clear_tasks(self, task_list_id: str) -> dict[str, Any]:
        return await self._request("POST", f"/lists/{_segment(task_list_id)}/clear")

    async def move_task(
        self,
        task_list_id: str,
        task_id: str,
        parent: str | None = None,
        previous: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            f"/lists/{_segment(task_list_id)}/tasks/{_segment(task_id)}/move",
            params={"parent": parent, "previous": previous},
        )


_client: TasksClient | None = None


def get_client() -> TasksClient:
    """
    Return the process-wide API client, building it from the environment on
    first use.

    Raises:
        ConfigError: If no credentials are configured
    """
    global _client
    if _client is None:
        _client = TasksClient.from_settings(Settings.from_env())
    return _client


def set_client(client: TasksClient | None) -> None:
    """Install (or with None, reset) the process-wide API client."""
    global _client
    _client = client

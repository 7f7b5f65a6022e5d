"""Pytest configuration and fixtures for gtasks-mcp tests."""

import copy
from typing import Any

import pytest

from gtasks_mcp.errors import RemoteCallError
from gtasks_mcp.utils.api import set_client


class FakeTasksClient:
    """In-memory stand-in for TasksClient.

    Records every call as a tuple of (method, *positional ids) in ``calls``.
    ``fail(method, *ids)`` makes matching calls raise RemoteCallError.
    """

    def __init__(self) -> None:
        self.lists: list[dict[str, Any]] = []
        self.tasks: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple] = []
        self.inserted: list[dict[str, Any]] = []
        self.patched: list[dict[str, Any]] = []
        self.failures: dict[tuple, RemoteCallError] = {}
        self.insert_returns_no_id = False
        self._counter = 0

    # -- setup helpers -------------------------------------------------

    def add_list(self, list_id: str, title: str) -> None:
        self.lists.append({"kind": "tasks#taskList", "id": list_id, "title": title, "updated": "2025-01-01T00:00:00Z"})
        self.tasks.setdefault(list_id, [])

    def add_task(self, list_id: str, task_id: str, title: str | None, **fields: Any) -> dict[str, Any]:
        task = {"kind": "tasks#task", "id": task_id, "status": "needsAction", **fields}
        if title is not None:
            task["title"] = title
        self.tasks[list_id].append(task)
        return task

    def fail(self, method: str, *ids: str, message: str = "500 Backend Error", status_code: int = 500) -> None:
        self.failures[(method, *ids)] = RemoteCallError(message, status_code=status_code)

    def calls_to(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    def find(self, list_id: str, task_id: str) -> dict[str, Any] | None:
        return next((t for t in self.tasks.get(list_id, []) if t["id"] == task_id), None)

    # -- internals -----------------------------------------------------

    def _record(self, method: str, *ids: str) -> None:
        call = (method, *ids)
        self.calls.append(call)
        for key, error in self.failures.items():
            if call[: len(key)] == key:
                raise error

    def _new_id(self, prefix: str = "new") -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}"

    def _require_list(self, list_id: str) -> list[dict[str, Any]]:
        if list_id not in self.tasks:
            raise RemoteCallError("404 Task list not found.", status_code=404)
        return self.tasks[list_id]

    def _require_task(self, list_id: str, task_id: str) -> dict[str, Any]:
        task = self.find(list_id, task_id)
        if task is None:
            raise RemoteCallError("404 Task not found.", status_code=404)
        return task

    # -- task lists ----------------------------------------------------

    async def list_task_lists(self, max_results: int = 100, page_token: str | None = None) -> dict[str, Any]:
        self._record("list_task_lists")
        return {"kind": "tasks#taskLists", "items": copy.deepcopy(self.lists[:max_results])}

    async def insert_task_list(self, body: dict[str, Any]) -> dict[str, Any]:
        self._record("insert_task_list", body.get("title"))
        list_id = self._new_id("list")
        self.add_list(list_id, body["title"])
        return copy.deepcopy(self.lists[-1])

    async def update_task_list(self, task_list_id: str, body: dict[str, Any]) -> dict[str, Any]:
        self._record("update_task_list", task_list_id)
        for task_list in self.lists:
            if task_list["id"] == task_list_id:
                task_list["title"] = body["title"]
                return copy.deepcopy(task_list)
        raise RemoteCallError("404 Task list not found.", status_code=404)

    async def delete_task_list(self, task_list_id: str) -> dict[str, Any]:
        self._record("delete_task_list", task_list_id)
        self._require_list(task_list_id)
        self.lists = [t for t in self.lists if t["id"] != task_list_id]
        del self.tasks[task_list_id]
        return {}

    # -- tasks ---------------------------------------------------------

    async def list_tasks(
        self, task_list_id: str, max_results: int = 100, page_token: str | None = None
    ) -> dict[str, Any]:
        self._record("list_tasks", task_list_id)
        items = self._require_list(task_list_id)
        start = int(page_token or 0)
        page = items[start : start + max_results]
        response: dict[str, Any] = {"kind": "tasks#tasks", "items": copy.deepcopy(page)}
        if start + max_results < len(items):
            response["nextPageToken"] = str(start + max_results)
        return response

    async def get_task(self, task_list_id: str, task_id: str) -> dict[str, Any]:
        self._record("get_task", task_list_id, task_id)
        self._require_list(task_list_id)
        return copy.deepcopy(self._require_task(task_list_id, task_id))

    async def insert_task(self, task_list_id: str, body: dict[str, Any], parent: str | None = None) -> dict[str, Any]:
        self._record("insert_task", task_list_id)
        self._require_list(task_list_id)
        self.inserted.append({"task_list_id": task_list_id, "body": copy.deepcopy(body), "parent": parent})
        if self.insert_returns_no_id:
            return {"title": body.get("title")}
        task = {"kind": "tasks#task", "id": self._new_id(), **body}
        if parent:
            task["parent"] = parent
        self.tasks[task_list_id].append(task)
        return copy.deepcopy(task)

    async def update_task(self, task_list_id: str, task_id: str, body: dict[str, Any]) -> dict[str, Any]:
        self._record("update_task", task_list_id, task_id)
        task = self._require_task(task_list_id, task_id)
        task.clear()
        task.update(body)
        return copy.deepcopy(task)

    async def patch_task(self, task_list_id: str, task_id: str, body: dict[str, Any]) -> dict[str, Any]:
        self._record("patch_task", task_list_id, task_id)
        task = self._require_task(task_list_id, task_id)
        self.patched.append({"task_list_id": task_list_id, "task_id": task_id, "body": copy.deepcopy(body)})
        task.update(body)
        return copy.deepcopy(task)

    async def delete_task(self, task_list_id: str, task_id: str) -> dict[str, Any]:
        self._record("delete_task", task_list_id, task_id)
        self._require_task(task_list_id, task_id)
        self.tasks[task_list_id] = [t for t in self.tasks[task_list_id] if t["id"] != task_id]
        return {}

    async def clear_tasks(self, task_list_id: str) -> dict[str, Any]:
        self._record("clear_tasks", task_list_id)
        items = self._require_list(task_list_id)
        self.tasks[task_list_id] = [t for t in items if t.get("status") != "completed"]
        return {}

    async def move_task(
        self, task_list_id: str, task_id: str, parent: str | None = None, previous: str | None = None
    ) -> dict[str, Any]:
        self._record("move_task", task_list_id, task_id)
        task = self._require_task(task_list_id, task_id)
        if parent:
            task["parent"] = parent
        else:
            task.pop("parent", None)
        return copy.deepcopy(task)


@pytest.fixture
def fake_client():
    """An empty FakeTasksClient installed as the process-wide client."""
    client = FakeTasksClient()
    set_client(client)
    yield client
    set_client(None)


@pytest.fixture
def populated_client(fake_client):
    """Two lists ("Inbox", "Admin Tasks") and a handful of tasks."""
    fake_client.add_list("inbox", "Inbox")
    fake_client.add_list("admin", "Admin Tasks")
    fake_client.add_task("inbox", "t1", "[ADMIN] Renew passport", notes="Before March", due="2025-03-01T00:00:00.000Z")
    fake_client.add_task("inbox", "t2", "Buy milk")
    fake_client.add_task("inbox", "t3", "Pay rent", status="completed", notes="Monthly")
    fake_client.add_task("admin", "a1", "[ADMIN] File taxes")
    return fake_client

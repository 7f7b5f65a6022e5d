"""Enumerating tasks across every task list."""

import logging

from gtasks_mcp.config import MAX_TASK_RESULTS, RESOURCE_PAGE_SIZE
from gtasks_mcp.errors import NotFoundError, RemoteCallError
from gtasks_mcp.models.task import TaskListModel, TaskModel
from gtasks_mcp.utils.api import TasksClient
from gtasks_mcp.utils.parsers import _attach_list, _parse_task, _parse_task_lists, _parse_tasks

logger = logging.getLogger(__name__)


async def fetch_task_lists(client: TasksClient) -> list[TaskListModel]:
    """Fetch the first page (up to 100) of the user's task lists."""
    response = await client.list_task_lists(max_results=MAX_TASK_RESULTS)
    return _parse_task_lists(response)


async def collect_tasks(client: TasksClient) -> list[TaskModel]:
    """
    Fetch up to 100 tasks from every task list into one flat list.

    Each task is annotated with the ID and title of the list it came from.
    A list whose tasks cannot be fetched is logged and skipped; a failure to
    fetch the task lists themselves propagates.

    Args:
        client: Google Tasks API client

    Returns:
        Tasks in list order, then in API order within each list
    """
    all_tasks: list[TaskModel] = []

    for task_list in await fetch_task_lists(client):
        if not task_list.id:
            continue
        try:
            response = await client.list_tasks(task_list.id, max_results=MAX_TASK_RESULTS)
        except RemoteCallError as e:
            logger.warning("Error fetching tasks for list %s: %s", task_list.id, e)
            continue
        all_tasks.extend(_attach_list(_parse_tasks(response), task_list))

    return all_tasks


async def search_tasks(client: TasksClient, query: str) -> list[TaskModel]:
    """Return tasks whose title or notes contain ``query``, ignoring case."""
    needle = query.lower()
    return [
        task
        for task in await collect_tasks(client)
        if needle in (task.title or "").lower() or needle in (task.notes or "").lower()
    ]


async def list_task_resources(
    client: TasksClient,
    cursor: str | None = None,
) -> tuple[list[TaskModel], str | None]:
    """
    Fetch one page of tasks from every list for resource listing.

    The same cursor is sent to every list. The returned cursor is the last
    non-empty ``nextPageToken`` seen in this pass, or None.

    Returns:
        Tuple of (tasks, next_cursor)
    """
    tasks: list[TaskModel] = []
    next_cursor: str | None = None

    for task_list in await fetch_task_lists(client):
        if not task_list.id:
            continue
        response = await client.list_tasks(task_list.id, max_results=RESOURCE_PAGE_SIZE, page_token=cursor)
        tasks.extend(_attach_list(_parse_tasks(response), task_list))
        if response.get("nextPageToken"):
            next_cursor = response["nextPageToken"]

    return tasks, next_cursor


async def find_task(client: TasksClient, task_id: str) -> TaskModel:
    """
    Look a task up by ID in each list in turn.

    Raises:
        NotFoundError: If no list holds a task with this ID
    """
    for task_list in await fetch_task_lists(client):
        if not task_list.id:
            continue
        try:
            response = await client.get_task(task_list.id, task_id)
        except RemoteCallError:
            continue
        task = _parse_task(response)
        task.task_list_id = task_list.id
        task.task_list_title = task_list.title
        return task

    raise NotFoundError(f"Task not found: {task_id}")

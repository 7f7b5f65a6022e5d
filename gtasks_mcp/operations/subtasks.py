"""Subtask operations: reparenting, creating and listing child tasks."""

import logging

from gtasks_mcp.config import DEFAULT_LIST_ID, MAX_TASK_RESULTS
from gtasks_mcp.errors import GTasksError, NotFoundError, RemoteCallError, ReparentError, VerificationError
from gtasks_mcp.models.inputs import BatchCreateSubtaskItem
from gtasks_mcp.models.results import BatchError, BatchReport, BatchResult
from gtasks_mcp.models.task import TaskModel
from gtasks_mcp.utils.api import TasksClient
from gtasks_mcp.utils.parsers import _parse_task, _parse_tasks, _task_body

logger = logging.getLogger(__name__)


async def _verify_task(client: TasksClient, task_list_id: str, task_id: str, what: str = "tasks") -> TaskModel:
    try:
        return _parse_task(await client.get_task(task_list_id, task_id))
    except RemoteCallError as e:
        raise VerificationError(f"Could not verify {what}: {e}") from e


async def make_subtask(
    client: TasksClient,
    task_list_id: str,
    task_id: str,
    parent_task_id: str,
) -> TaskModel:
    """
    Make an existing task a child of another task in the same list.

    Both tasks are fetched first; the reparent is only attempted when both
    exist.

    Raises:
        VerificationError: If either task cannot be fetched
        ReparentError: If the remote move call fails
    """
    await _verify_task(client, task_list_id, task_id)
    await _verify_task(client, task_list_id, parent_task_id)

    try:
        moved = await client.move_task(task_list_id, task_id, parent=parent_task_id)
    except RemoteCallError as e:
        raise ReparentError(f"Could not make subtask: {e}", status_code=e.status_code) from e

    return _parse_task(moved)


async def create_subtask(
    client: TasksClient,
    task_list_id: str,
    parent_task_id: str,
    title: str,
    notes: str | None = None,
    due: str | None = None,
    status: str | None = None,
) -> TaskModel:
    """
    Create a new task directly under ``parent_task_id``.

    Raises:
        VerificationError: If the parent task cannot be fetched
        RemoteCallError: If the insert fails
    """
    await _verify_task(client, task_list_id, parent_task_id, what="parent task")

    try:
        created = await client.insert_task(
            task_list_id, _task_body(title, notes, due, status), parent=parent_task_id
        )
    except RemoteCallError as e:
        raise RemoteCallError(f"Could not create subtask: {e}", status_code=e.status_code) from e

    return _parse_task(created)


async def list_subtasks(
    client: TasksClient,
    task_list_id: str,
    parent_task_id: str,
) -> tuple[TaskModel, list[TaskModel]]:
    """
    List the direct children of a task.

    The API has no parent filter, so every page of the list is fetched and
    filtered here. Grandchildren are not included.

    Returns:
        Tuple of (parent task, child tasks in API order)

    Raises:
        NotFoundError: If the parent task cannot be fetched
        RemoteCallError: If listing the tasks fails
    """
    items: list[TaskModel] = []
    page_token: str | None = None
    seen_tokens: set[str] = set()
    while True:
        response = await client.list_tasks(task_list_id, max_results=MAX_TASK_RESULTS, page_token=page_token)
        items.extend(_parse_tasks(response))
        page_token = response.get("nextPageToken")
        if not page_token:
            break
        if page_token in seen_tokens:
            logger.warning("Page token %s repeated while listing %s; stopping", page_token, task_list_id)
            break
        seen_tokens.add(page_token)

    try:
        parent = _parse_task(await client.get_task(task_list_id, parent_task_id))
    except RemoteCallError as e:
        raise NotFoundError(f"Could not get parent task: {e}") from e

    children = [task for task in items if task.parent == parent_task_id]
    for child in children:
        child.task_list_id = task_list_id
    return parent, children


async def batch_create_subtasks(client: TasksClient, items: list[BatchCreateSubtaskItem]) -> BatchReport:
    """Create each subtask independently; one failure does not stop the rest."""
    report = BatchReport(operation="subtask creation")

    for item in items:
        descriptor = item.model_dump(mode="json", exclude_none=True)
        if not item.parent_task_id or not item.title:
            logger.warning("Batch subtask creation element failed: missing parent task ID or title")
            report.errors.append(BatchError(error="Parent task ID and title are required", item=descriptor))
            continue

        task_list_id = item.task_list_id or DEFAULT_LIST_ID
        try:
            created = await create_subtask(
                client,
                task_list_id,
                item.parent_task_id,
                item.title,
                notes=item.notes,
                due=item.due,
                status=item.status.value if item.status else None,
            )
        except GTasksError as e:
            logger.warning("Batch subtask creation element failed: %s", e)
            report.errors.append(BatchError(error=str(e), item=descriptor))
            continue

        report.results.append(
            BatchResult(
                task_id=created.id,
                title=created.title or item.title,
                parent_task_id=item.parent_task_id,
                task_list_id=task_list_id,
            )
        )

    return report

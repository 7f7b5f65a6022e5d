"""Moving a single task between lists."""

import logging

from gtasks_mcp.errors import CreateFailedError, NotFoundError, RemoteCallError
from gtasks_mcp.models.results import TransferOutcome
from gtasks_mcp.models.task import TaskModel
from gtasks_mcp.utils.api import TasksClient
from gtasks_mcp.utils.parsers import _parse_task, _task_body

logger = logging.getLogger(__name__)


async def transfer_task(
    client: TasksClient,
    source_task_list_id: str,
    target_task_list_id: str,
    task_id: str,
    task: TaskModel | None = None,
) -> TransferOutcome:
    """
    Move a task to another list by copying it there and deleting the original.

    The API has no cross-list move, so the moved task gets a new ID and is
    always top-level in the target list. If the final delete fails the copy
    is kept and the outcome is returned with ``source_removed=False``.

    Args:
        client: Google Tasks API client
        source_task_list_id: List the task is in now
        target_task_list_id: List to move it to
        task_id: ID of the task in the source list
        task: The task as already fetched, to skip the initial get

    Returns:
        TransferOutcome describing the new task

    Raises:
        NotFoundError: If the source task cannot be fetched or has no title
        CreateFailedError: If inserting the copy fails or returns no ID
    """
    if task is None:
        try:
            task = _parse_task(await client.get_task(source_task_list_id, task_id))
        except RemoteCallError as e:
            raise NotFoundError(f"Could not get source task: {e}") from e

    if not task.title:
        raise NotFoundError("Could not get source task: Task not found or has invalid format")

    body = _task_body(task.title, task.notes, task.due, task.status)
    try:
        created = await client.insert_task(target_task_list_id, body)
    except RemoteCallError as e:
        raise CreateFailedError(f"Could not create task in target list: {e}", status_code=e.status_code) from e

    new_task_id = created.get("id")
    if not new_task_id:
        raise CreateFailedError("Could not create task in target list: Failed to create new task - no ID returned")

    outcome = TransferOutcome(
        title=task.title,
        original_task_id=task_id,
        new_task_id=new_task_id,
        source_task_list_id=source_task_list_id,
        target_task_list_id=target_task_list_id,
    )

    try:
        await client.delete_task(source_task_list_id, task_id)
    except RemoteCallError as e:
        outcome.source_removed = False
        outcome.warning = (
            f"Created task {new_task_id} in {target_task_list_id} but failed to delete original: {e}"
        )
        logger.warning(outcome.warning)

    return outcome

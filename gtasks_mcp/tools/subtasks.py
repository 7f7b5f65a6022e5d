"""Subtask MCP tools for Google Tasks."""

import json
import logging

from mcp.types import CallToolResult, ToolAnnotations

from gtasks_mcp.enums import ResponseFormat
from gtasks_mcp.errors import GTasksError
from gtasks_mcp.models.inputs import (
    BatchCreateSubtasksInput,
    CreateSubtaskInput,
    ListSubtasksInput,
    MakeSubtaskInput,
)
from gtasks_mcp.operations.subtasks import batch_create_subtasks, create_subtask, list_subtasks, make_subtask
from gtasks_mcp.server import mcp
from gtasks_mcp.utils.api import get_client
from gtasks_mcp.utils.formatters import (
    _error_result,
    _format_batch_report,
    _format_tasks_concise,
    _format_tasks_json,
    _format_tasks_markdown,
    _text_result,
)

logger = logging.getLogger(__name__)


@mcp.tool(
    name="gtasks_make_subtask",
    annotations=ToolAnnotations(
        title="Make Subtask",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_make_subtask(params: MakeSubtaskInput) -> CallToolResult:
    """
    Make an existing task a subtask of another task.

    Both tasks must already be in the same list; move one first with
    gtasks_move_task if they are not.

    Args:
        params: MakeSubtaskInput containing task_list_id, task_id and parent_task_id

    Returns:
        Confirmation message
    """
    try:
        task = await make_subtask(get_client(), params.task_list_id, params.task_id, params.parent_task_id)
    except GTasksError as e:
        logger.error("Error making subtask: %s", e)
        return _error_result("making subtask", e)

    return _text_result(
        f'Task "{task.title or params.task_id}" is now a subtask of task with ID {params.parent_task_id}'
    )


@mcp.tool(
    name="gtasks_create_subtask",
    annotations=ToolAnnotations(
        title="Create Subtask",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_create_subtask(params: CreateSubtaskInput) -> CallToolResult:
    """
    Create a new task as a subtask of an existing task.

    Args:
        params: CreateSubtaskInput containing parent_task_id, title and optional list, notes, due, status

    Returns:
        Confirmation with the new subtask's ID

    Examples:
        - params with parent_task_id="abc", title="Book flights"
    """
    try:
        task = await create_subtask(
            get_client(),
            params.task_list_id,
            params.parent_task_id,
            params.title,
            notes=params.notes,
            due=params.due,
            status=params.status.value if params.status else None,
        )
    except GTasksError as e:
        logger.error("Error creating subtask: %s", e)
        return _error_result("creating subtask", e)

    return _text_result(
        f'Subtask "{task.title or params.title}" created under parent task with ID {params.parent_task_id} '
        f"(ID: {task.id})"
    )


@mcp.tool(
    name="gtasks_list_subtasks",
    annotations=ToolAnnotations(
        title="List Subtasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_list_subtasks(params: ListSubtasksInput) -> CallToolResult:
    """
    List the direct subtasks of a task.

    Args:
        params: ListSubtasksInput containing parent_task_id and optional task_list_id

    Returns:
        The parent's direct children (grandchildren are not included)
    """
    try:
        parent, children = await list_subtasks(get_client(), params.task_list_id, params.parent_task_id)
    except GTasksError as e:
        logger.error("Error listing subtasks: %s", e)
        return _error_result("listing subtasks", e)

    title = f"Subtasks of \"{parent.title or 'Unknown task'}\""
    if params.response_format == ResponseFormat.JSON:
        data = json.loads(_format_tasks_json(children))
        data["parent"] = {"id": parent.id, "title": parent.title}
        return _text_result(json.dumps(data, indent=2))
    if params.response_format == ResponseFormat.CONCISE:
        return _text_result(_format_tasks_concise(children, title))
    return _text_result(_format_tasks_markdown(children, title))


@mcp.tool(
    name="gtasks_batch_create_subtasks",
    annotations=ToolAnnotations(
        title="Batch Create Subtasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_batch_create_subtasks(params: BatchCreateSubtasksInput) -> CallToolResult:
    """
    Create multiple subtasks at once, possibly under different parents.

    Each entry needs parent_task_id and title. Each parent is checked before
    its subtask is created; one failing entry does not stop the others.

    Args:
        params: BatchCreateSubtasksInput containing a non-empty subtasks array

    Returns:
        "N succeeded, M failed" summary with per-subtask lines
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("creating subtasks", e)

    report = await batch_create_subtasks(client, params.subtasks)
    if params.response_format == ResponseFormat.JSON:
        return _text_result(json.dumps(report.model_dump(mode="json", exclude_none=True), indent=2))
    return _text_result(_format_batch_report(report))

"""Core MCP tool definitions for Google Tasks."""

import json
import logging

from mcp.types import CallToolResult, ToolAnnotations

from gtasks_mcp.enums import ResponseFormat
from gtasks_mcp.errors import GTasksError
from gtasks_mcp.models.inputs import (
    ClearTasksInput,
    CreateTaskInput,
    DeleteTaskInput,
    ListTaskListsInput,
    ListTasksInput,
    MoveTaskInput,
    SearchTasksInput,
    UpdateTaskInput,
)
from gtasks_mcp.models.task import TaskModel
from gtasks_mcp.operations.listing import collect_tasks, fetch_task_lists, search_tasks
from gtasks_mcp.operations.transfer import transfer_task
from gtasks_mcp.server import mcp
from gtasks_mcp.utils.api import get_client
from gtasks_mcp.utils.formatters import (
    _error_result,
    _format_task_lists,
    _format_tasks_concise,
    _format_tasks_json,
    _format_tasks_markdown,
    _text_result,
)
from gtasks_mcp.utils.parsers import _task_body

logger = logging.getLogger(__name__)


def _render_tasks(tasks: list[TaskModel], response_format: ResponseFormat, title: str) -> str:
    if response_format == ResponseFormat.JSON:
        return _format_tasks_json(tasks)
    if response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, title)
    return _format_tasks_markdown(tasks, title)


@mcp.tool(
    name="gtasks_search",
    annotations=ToolAnnotations(
        title="Search Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_search(params: SearchTasksInput) -> CallToolResult:
    """
    Search for tasks in Google Tasks by title or notes.

    USE THIS WHEN:
    - Looking for a task whose ID you don't know
    - Finding every task that mentions a word or phrase

    DO NOT USE WHEN:
    - You want everything → use gtasks_list instead
    - You want the children of a task → use gtasks_list_subtasks instead

    Matching is a case-insensitive substring match over the first 100 tasks
    of every task list.

    Args:
        params: SearchTasksInput containing query and response_format

    Returns:
        Matching tasks with their list, due date, status and ID

    Examples:
        - Find milk tasks: params with query="milk"
    """
    try:
        tasks = await search_tasks(get_client(), params.query)
    except GTasksError as e:
        logger.error("Error searching tasks: %s", e)
        return _error_result("searching tasks", e)

    return _text_result(_render_tasks(tasks, params.response_format, f"Search '{params.query}'"))


@mcp.tool(
    name="gtasks_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_list(params: ListTasksInput) -> CallToolResult:
    """
    List all tasks across every Google Tasks list.

    Each task is shown with the title and ID of the list it belongs to. Up to
    100 tasks are read from each list; lists that fail to load are skipped.

    Args:
        params: ListTasksInput with response_format

    Returns:
        All tasks (markdown, concise or JSON)
    """
    try:
        tasks = await collect_tasks(get_client())
    except GTasksError as e:
        logger.error("Error listing tasks: %s", e)
        return _error_result("listing tasks", e)

    return _text_result(_render_tasks(tasks, params.response_format, "All Tasks"))


@mcp.tool(
    name="gtasks_create",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_create(params: CreateTaskInput) -> CallToolResult:
    """
    Create a new task in Google Tasks.

    USE THIS WHEN:
    - Adding a single new task

    DO NOT USE WHEN:
    - Creating several tasks → use gtasks_batch_create_tasks instead
    - Creating a task under another task → use gtasks_create_subtask instead

    Args:
        params: CreateTaskInput containing title and optional list, notes, due, status

    Returns:
        Confirmation with the created task's title and ID

    Examples:
        - Simple task: params with title="Buy groceries"
        - In a list with a due date: params with task_list_id="abc", title="Pay rent", due="2025-02-01T00:00:00Z"
    """
    status = params.status.value if params.status else None
    try:
        created = await get_client().insert_task(
            params.task_list_id, _task_body(params.title, params.notes, params.due, status)
        )
    except GTasksError as e:
        logger.error("Error creating task: %s", e)
        return _error_result("creating task", e)

    return _text_result(f"Task created: {created.get('title', params.title)} (ID: {created.get('id')})")


@mcp.tool(
    name="gtasks_update",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_update(params: UpdateTaskInput) -> CallToolResult:
    """
    Update an existing task's title, notes, status or due date.

    Only the fields you supply are changed. Set status="completed" to tick a
    task off, or status="needsAction" to reopen it.

    Args:
        params: UpdateTaskInput containing task_id and the fields to change

    Returns:
        Confirmation with the updated task's title

    Examples:
        - Complete a task: params with task_id="abc", status="completed"
        - Rename: params with task_list_id="xyz", task_id="abc", title="New title"
    """
    body = params.model_dump(mode="json", include={"title", "notes", "status", "due"}, exclude_none=True)
    body["id"] = params.task_id
    try:
        updated = await get_client().patch_task(params.task_list_id, params.task_id, body)
    except GTasksError as e:
        logger.error("Error updating task: %s", e)
        return _error_result("updating task", e)

    return _text_result(f"Task updated: {updated.get('title', params.task_id)}")


@mcp.tool(
    name="gtasks_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_delete(params: DeleteTaskInput) -> CallToolResult:
    """
    Delete a task from Google Tasks.

    Args:
        params: DeleteTaskInput containing task_id and optional task_list_id

    Returns:
        Confirmation message
    """
    try:
        await get_client().delete_task(params.task_list_id, params.task_id)
    except GTasksError as e:
        logger.error("Error deleting task: %s", e)
        return _error_result("deleting task", e)

    return _text_result(f"Task {params.task_id} deleted")


@mcp.tool(
    name="gtasks_clear",
    annotations=ToolAnnotations(
        title="Clear Completed Tasks",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_clear(params: ClearTasksInput) -> CallToolResult:
    """
    Clear all completed tasks from a task list.

    Cleared tasks are hidden and no longer returned by default.

    Args:
        params: ClearTasksInput containing task_list_id

    Returns:
        Confirmation message
    """
    try:
        await get_client().clear_tasks(params.task_list_id)
    except GTasksError as e:
        logger.error("Error clearing tasks: %s", e)
        return _error_result("clearing tasks", e)

    return _text_result(f"Tasks from tasklist {params.task_list_id} cleared")


@mcp.tool(
    name="gtasks_list_task_lists",
    annotations=ToolAnnotations(
        title="List Task Lists",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_list_task_lists(params: ListTaskListsInput) -> CallToolResult:
    """
    List all task lists with their IDs.

    USE THIS WHEN:
    - You need a list ID for another tool
    - Checking list titles before a gtasks_reorganize run

    Args:
        params: ListTaskListsInput with response_format

    Returns:
        Task lists with title, ID and last update time
    """
    try:
        task_lists = await fetch_task_lists(get_client())
    except GTasksError as e:
        logger.error("Error listing task lists: %s", e)
        return _error_result("listing task lists", e)

    if params.response_format == ResponseFormat.JSON:
        return _text_result(
            json.dumps(
                {"task_lists": [t.model_dump(mode="json", by_alias=True, exclude_none=True) for t in task_lists]},
                indent=2,
            )
        )
    return _text_result(_format_task_lists(task_lists))


@mcp.tool(
    name="gtasks_move_task",
    annotations=ToolAnnotations(
        title="Move Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_move_task(params: MoveTaskInput) -> CallToolResult:
    """
    Move a task from one task list to another.

    The task is recreated in the target list (title, notes, due date and
    status are kept) and then deleted from the source list. The moved task
    gets a NEW ID and becomes a top-level task. If the delete fails, the copy
    is kept and the result says so; delete the original by hand.

    DO NOT USE WHEN:
    - Moving several tasks → use gtasks_batch_move_tasks instead
    - Routing tasks by title prefix → use gtasks_reorganize instead

    Args:
        params: MoveTaskInput containing source_task_list_id, target_task_list_id and task_id

    Returns:
        Confirmation with the new task ID
    """
    try:
        outcome = await transfer_task(
            get_client(), params.source_task_list_id, params.target_task_list_id, params.task_id
        )
    except GTasksError as e:
        logger.error("Error moving task: %s", e)
        return _error_result("moving task", e)

    if not outcome.source_removed:
        return _text_result(
            f'Task "{outcome.title}" was copied to list "{outcome.target_task_list_id}" '
            f"(new ID: {outcome.new_task_id}) but could not be deleted from source list "
            f'"{outcome.source_task_list_id}". You may need to delete it manually.'
        )

    return _text_result(
        f'Task "{outcome.title}" moved from list "{outcome.source_task_list_id}" to list '
        f'"{outcome.target_task_list_id}" (new ID: {outcome.new_task_id})'
    )

"""Batch and reorganization MCP tools for Google Tasks."""

import json
import logging

from mcp.types import CallToolResult, ToolAnnotations

from gtasks_mcp.enums import ResponseFormat
from gtasks_mcp.errors import GTasksError
from gtasks_mcp.models.inputs import (
    BatchCreateTaskListsInput,
    BatchCreateTasksInput,
    BatchDeleteTaskListsInput,
    BatchDeleteTasksInput,
    BatchMoveTasksInput,
    BatchUpdateTaskListsInput,
    BatchUpdateTasksInput,
    ReorganizeTasksInput,
)
from gtasks_mcp.models.results import BatchReport
from gtasks_mcp.operations.batch import (
    batch_create_task_lists,
    batch_create_tasks,
    batch_delete_task_lists,
    batch_delete_tasks,
    batch_move_tasks,
    batch_update_task_lists,
    batch_update_tasks,
)
from gtasks_mcp.operations.reorganize import reorganize_tasks
from gtasks_mcp.server import mcp
from gtasks_mcp.utils.api import get_client
from gtasks_mcp.utils.formatters import _error_result, _format_batch_report, _format_reorganize_report, _text_result

logger = logging.getLogger(__name__)


def _render_report(report: BatchReport, response_format: ResponseFormat) -> CallToolResult:
    # Failed elements are part of a normal report, never an error result
    if response_format == ResponseFormat.JSON:
        return _text_result(json.dumps(report.model_dump(mode="json", exclude_none=True), indent=2))
    return _text_result(_format_batch_report(report))


@mcp.tool(
    name="gtasks_reorganize",
    annotations=ToolAnnotations(
        title="Reorganize Tasks By Prefix",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_reorganize(params: ReorganizeTasksInput) -> CallToolResult:
    """
    Move tasks into lists based on a bracketed prefix at the start of their title.

    A task titled "[ADMIN] Renew passport" with prefix_mappings
    {"ADMIN": "Admin Tasks"} is moved to the "Admin Tasks" list. Prefixes are
    case-sensitive; list titles are matched exactly first, then ignoring case
    and surrounding whitespace. Moved tasks get new IDs. Titles are not
    changed.

    USE THIS WHEN:
    - Sorting an inbox of prefixed tasks into their proper lists

    TIP: Run with dry_run=True first to see what would move.

    Args:
        params: ReorganizeTasksInput containing prefix_mappings, dry_run and response_format

    Returns:
        Planned moves (dry run) or per-task results with a success/failure summary

    Examples:
        - Preview: params with prefix_mappings={"ADMIN": "Admin Tasks"}, dry_run=True
        - Several prefixes: params with prefix_mappings={"WORK": "Work", "HOME": "Home"}
    """
    try:
        report = await reorganize_tasks(get_client(), params.prefix_mappings, dry_run=params.dry_run)
    except GTasksError as e:
        logger.error("Error reorganizing tasks: %s", e)
        return _error_result("reorganizing tasks", e)

    if params.response_format == ResponseFormat.JSON:
        return _text_result(json.dumps(report.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    return _text_result(_format_reorganize_report(report))


@mcp.tool(
    name="gtasks_batch_create_tasks",
    annotations=ToolAnnotations(
        title="Batch Create Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_batch_create_tasks(params: BatchCreateTasksInput) -> CallToolResult:
    """
    Create multiple tasks at once, optionally in different lists.

    Each task is created independently: one bad entry is reported and the
    rest still go through. Entries without a task_list_id go to '@default'.

    Args:
        params: BatchCreateTasksInput containing a non-empty tasks array

    Returns:
        "N succeeded, M failed" summary with per-task lines

    Examples:
        - params with tasks=[{"title": "Buy milk"}, {"task_list_id": "abc", "title": "Call bank"}]
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("creating tasks", e)
    return _render_report(await batch_create_tasks(client, params.tasks), params.response_format)


@mcp.tool(
    name="gtasks_batch_update_tasks",
    annotations=ToolAnnotations(
        title="Batch Update Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_batch_update_tasks(params: BatchUpdateTasksInput) -> CallToolResult:
    """
    Update multiple tasks at once.

    Each entry needs task_list_id and task_id; only the other fields it
    supplies are changed.

    Args:
        params: BatchUpdateTasksInput containing a non-empty tasks array

    Returns:
        "N succeeded, M failed" summary with per-task lines
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("updating tasks", e)
    return _render_report(await batch_update_tasks(client, params.tasks), params.response_format)


@mcp.tool(
    name="gtasks_batch_delete_tasks",
    annotations=ToolAnnotations(
        title="Batch Delete Tasks",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_batch_delete_tasks(params: BatchDeleteTasksInput) -> CallToolResult:
    """
    Delete multiple tasks at once.

    Args:
        params: BatchDeleteTasksInput; each entry needs task_list_id and task_id

    Returns:
        "N succeeded, M failed" summary with per-task lines
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("deleting tasks", e)
    return _render_report(await batch_delete_tasks(client, params.tasks), params.response_format)


@mcp.tool(
    name="gtasks_batch_move_tasks",
    annotations=ToolAnnotations(
        title="Batch Move Tasks",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_batch_move_tasks(params: BatchMoveTasksInput) -> CallToolResult:
    """
    Move multiple tasks between lists at once.

    Works like gtasks_move_task for each entry: moved tasks get new IDs.
    Entries that were copied but could not be removed from their source list
    are reported separately as partial successes.

    Args:
        params: BatchMoveTasksInput; each entry needs source_task_list_id, target_task_list_id and task_id

    Returns:
        Summary with successes, partial successes and errors
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("moving tasks", e)
    return _render_report(await batch_move_tasks(client, params.tasks), params.response_format)


@mcp.tool(
    name="gtasks_batch_create_task_lists",
    annotations=ToolAnnotations(
        title="Batch Create Task Lists",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def gtasks_batch_create_task_lists(params: BatchCreateTaskListsInput) -> CallToolResult:
    """
    Create multiple task lists at once.

    Args:
        params: BatchCreateTaskListsInput; each entry needs a title

    Returns:
        "N succeeded, M failed" summary with the new list IDs
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("creating task lists", e)
    return _render_report(await batch_create_task_lists(client, params.lists), params.response_format)


@mcp.tool(
    name="gtasks_batch_update_task_lists",
    annotations=ToolAnnotations(
        title="Batch Update Task Lists",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_batch_update_task_lists(params: BatchUpdateTaskListsInput) -> CallToolResult:
    """
    Rename multiple task lists at once.

    Args:
        params: BatchUpdateTaskListsInput; each entry needs list_id and title

    Returns:
        "N succeeded, M failed" summary
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("updating task lists", e)
    return _render_report(await batch_update_task_lists(client, params.lists), params.response_format)


@mcp.tool(
    name="gtasks_batch_delete_task_lists",
    annotations=ToolAnnotations(
        title="Batch Delete Task Lists",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def gtasks_batch_delete_task_lists(params: BatchDeleteTaskListsInput) -> CallToolResult:
    """
    Delete multiple task lists (and all their tasks) at once.

    Args:
        params: BatchDeleteTaskListsInput; each entry needs list_id

    Returns:
        "N succeeded, M failed" summary
    """
    try:
        client = get_client()
    except GTasksError as e:
        return _error_result("deleting task lists", e)
    return _render_report(await batch_delete_task_lists(client, params.lists), params.response_format)

"""Batch executors with per-element isolation.

Each executor walks its input in order and sorts every element into exactly
one of the report's results, errors or (moves only) warnings. A missing
required field is recorded as an error before any remote call is made, and
no element's failure affects the others.
"""

import logging

from gtasks_mcp.config import DEFAULT_LIST_ID
from gtasks_mcp.errors import GTasksError
from gtasks_mcp.models.inputs import (
    BatchCreateTaskItem,
    BatchCreateTaskListItem,
    BatchDeleteTaskItem,
    BatchDeleteTaskListItem,
    BatchMoveTaskItem,
    BatchUpdateTaskItem,
    BatchUpdateTaskListItem,
)
from gtasks_mcp.models.results import BatchError, BatchReport, BatchResult, BatchWarning
from gtasks_mcp.operations.transfer import transfer_task
from gtasks_mcp.utils.api import TasksClient
from gtasks_mcp.utils.parsers import _task_body

logger = logging.getLogger(__name__)


def _descriptor(item) -> dict:
    return item.model_dump(mode="json", exclude_none=True)


def _fail(report: BatchReport, item, message: str) -> None:
    logger.warning("Batch %s element failed: %s", report.operation, message)
    report.errors.append(BatchError(error=message, item=_descriptor(item)))


async def batch_create_tasks(client: TasksClient, items: list[BatchCreateTaskItem]) -> BatchReport:
    """Create each task in its list (``@default`` when none is given)."""
    report = BatchReport(operation="task creation")

    for item in items:
        if not item.title:
            _fail(report, item, "Task title is required")
            continue

        task_list_id = item.task_list_id or DEFAULT_LIST_ID
        status = item.status.value if item.status else None
        try:
            created = await client.insert_task(task_list_id, _task_body(item.title, item.notes, item.due, status))
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(
            BatchResult(task_id=created.get("id"), title=created.get("title", item.title), task_list_id=task_list_id)
        )

    return report


async def batch_update_tasks(client: TasksClient, items: list[BatchUpdateTaskItem]) -> BatchReport:
    """Patch only the supplied fields of each task."""
    report = BatchReport(operation="task update")

    for item in items:
        if not item.task_list_id or not item.task_id:
            _fail(report, item, "Task list ID and task ID are required")
            continue

        body = item.model_dump(mode="json", include={"title", "notes", "due", "status"}, exclude_none=True)
        body["id"] = item.task_id
        try:
            updated = await client.patch_task(item.task_list_id, item.task_id, body)
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(
            BatchResult(
                task_id=updated.get("id", item.task_id),
                title=updated.get("title") or item.title or item.task_id,
                task_list_id=item.task_list_id,
            )
        )

    return report


async def batch_delete_tasks(client: TasksClient, items: list[BatchDeleteTaskItem]) -> BatchReport:
    report = BatchReport(operation="task deletion")

    for item in items:
        if not item.task_list_id or not item.task_id:
            _fail(report, item, "Task list ID and task ID are required")
            continue

        try:
            await client.delete_task(item.task_list_id, item.task_id)
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(BatchResult(task_id=item.task_id, task_list_id=item.task_list_id))

    return report


async def batch_move_tasks(client: TasksClient, items: list[BatchMoveTaskItem]) -> BatchReport:
    """
    Move each task with the copy-then-delete transfer.

    A transfer whose delete step fails lands in ``warnings`` with the new
    task ID, not in ``errors``.
    """
    report = BatchReport(operation="task move")

    for item in items:
        if not item.source_task_list_id or not item.target_task_list_id or not item.task_id:
            _fail(report, item, "Source task list ID, target task list ID, and task ID are required")
            continue

        try:
            outcome = await transfer_task(client, item.source_task_list_id, item.target_task_list_id, item.task_id)
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        if not outcome.source_removed:
            report.warnings.append(
                BatchWarning(
                    warning=outcome.warning or "",
                    item=_descriptor(item),
                    title=outcome.title,
                    original_task_id=outcome.original_task_id,
                    new_task_id=outcome.new_task_id,
                )
            )
            continue

        report.results.append(
            BatchResult(
                title=outcome.title,
                original_task_id=outcome.original_task_id,
                new_task_id=outcome.new_task_id,
                source_task_list_id=outcome.source_task_list_id,
                target_task_list_id=outcome.target_task_list_id,
            )
        )

    return report


async def batch_create_task_lists(client: TasksClient, items: list[BatchCreateTaskListItem]) -> BatchReport:
    report = BatchReport(operation="task list creation")

    for item in items:
        if not item.title:
            _fail(report, item, "Task list title is required")
            continue

        try:
            created = await client.insert_task_list({"title": item.title})
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(BatchResult(list_id=created.get("id"), title=created.get("title", item.title)))

    return report


async def batch_update_task_lists(client: TasksClient, items: list[BatchUpdateTaskListItem]) -> BatchReport:
    report = BatchReport(operation="task list update")

    for item in items:
        if not item.list_id or not item.title:
            _fail(report, item, "Task list ID and title are required")
            continue

        try:
            updated = await client.update_task_list(item.list_id, {"id": item.list_id, "title": item.title})
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(
            BatchResult(list_id=updated.get("id", item.list_id), title=updated.get("title", item.title))
        )

    return report


async def batch_delete_task_lists(client: TasksClient, items: list[BatchDeleteTaskListItem]) -> BatchReport:
    report = BatchReport(operation="task list deletion")

    for item in items:
        if not item.list_id:
            _fail(report, item, "Task list ID is required")
            continue

        try:
            await client.delete_task_list(item.list_id)
        except GTasksError as e:
            _fail(report, item, str(e))
            continue

        report.results.append(BatchResult(list_id=item.list_id))

    return report

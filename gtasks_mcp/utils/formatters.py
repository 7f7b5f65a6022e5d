"""Formatting utilities for task output and tool results."""

import json

from mcp.types import CallToolResult, TextContent

from gtasks_mcp.models.results import BatchReport, ReorganizeReport
from gtasks_mcp.models.task import TaskListModel, TaskModel


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap text in the MCP tool result envelope."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def _error_result(action: str, error: Exception) -> CallToolResult:
    return _text_result(f"Error {action}: {error}", is_error=True)


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "Buy milk (list:Groceries, due:2025-01-31) id:abc123"
    """
    title = task.title or "Untitled"

    meta = []
    if task.status == "completed":
        meta.append("done")
    if task.task_list_title:
        meta.append(f"list:{task.task_list_title}")
    if task.due:
        meta.append(f"due:{task.due[:10]}")
    if task.parent:
        meta.append(f"parent:{task.parent}")

    if meta:
        return f"{title} ({', '.join(meta)}) id:{task.id}"
    return f"{title} id:{task.id}"


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | Search 'milk'
    Buy milk (list:Groceries) id:abc
    Oat milk id:def
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    return "\n".join([header] + [_format_task_concise(task) for task in tasks])


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    lines = []

    check = "[x]" if task.status == "completed" else "[ ]"
    lines.append(f"### {check} {task.title or 'Untitled'}")

    details = [f"**ID**: {task.id}"]
    if task.task_list_id or task.task_list_title:
        details.append(f"**List**: {task.task_list_title or 'Unknown'} [{task.task_list_id or 'Unknown'}]")
    details.append(f"**Due**: {task.due or 'Not set'}")
    if task.status:
        details.append(f"**Status**: {task.status}")
    if task.parent:
        details.append(f"**Parent**: {task.parent}")
    lines.append(" | ".join(details))

    if task.notes:
        lines.append(f"**Notes:** {task.notes}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_tasks_json(tasks: list[TaskModel]) -> str:
    return json.dumps(
        {"count": len(tasks), "tasks": [t.model_dump(mode="json", by_alias=True, exclude_none=True) for t in tasks]},
        indent=2,
    )


def _format_task_detail(task: TaskModel) -> str:
    """Plain-text detail block used when reading a task resource."""
    links = ", ".join(link.get("link", "") for link in task.links) if task.links else None
    return "\n".join(
        [
            f"Title: {task.title or 'No title'}",
            f"Status: {task.status or 'Unknown'}",
            f"Due: {task.due or 'Not set'}",
            f"Notes: {task.notes or 'No notes'}",
            f"Hidden: {task.hidden if task.hidden is not None else 'Unknown'}",
            f"Parent: {task.parent or 'None'}",
            f"Deleted?: {task.deleted if task.deleted is not None else 'Unknown'}",
            f"Completed Date: {task.completed or 'Unknown'}",
            f"Position: {task.position or 'Unknown'}",
            f"ETag: {task.etag or 'Unknown'}",
            f"Links: {links or 'None'}",
            f"Kind: {task.kind or 'Unknown'}",
            f"Updated: {task.updated or 'Unknown'}",
        ]
    )


def _format_task_lists(task_lists: list[TaskListModel]) -> str:
    lines = [f"Found {len(task_lists)} task lists:"]
    for task_list in task_lists:
        lines.append(
            f"List: {task_list.title or 'Unnamed'} - ID: {task_list.id or 'Unknown'} - "
            f"Updated: {task_list.updated or 'Unknown'}"
        )
    return "\n".join(lines)


# Success line template and failure verb for each batch operation
_BATCH_LINES: dict[str, tuple[str, str]] = {
    "task creation": ('- Task "{title}" created in list "{task_list_id}" with ID: {task_id}', "create task"),
    "task update": ('- Task "{title}" updated in list "{task_list_id}"', "update task"),
    "task deletion": ('- Task {task_id} deleted from list "{task_list_id}"', "delete task"),
    "task move": (
        '- Task "{title}" moved from list "{source_task_list_id}" to list "{target_task_list_id}"',
        "move task",
    ),
    "task list creation": ('- List "{title}" created with ID: {list_id}', "create list"),
    "task list update": ('- List "{title}" updated with ID: {list_id}', "update list"),
    "task list deletion": ("- List {list_id} deleted", "delete list"),
    "subtask creation": (
        '- Subtask "{title}" created under parent task {parent_task_id} with ID: {task_id}',
        "create subtask",
    ),
}


def _format_batch_report(report: BatchReport) -> str:
    """
    Render a batch report as a summary line followed by itemized sections.

    Output:
    Batch task deletion: 1 succeeded, 1 failed

    Successes:
    - Task abc deleted from list "xyz"

    Errors:
    - Failed to delete task: Task list ID and task ID are required
    """
    template, verb = _BATCH_LINES[report.operation]

    summary = f"Batch {report.operation}: {len(report.results)} succeeded, {len(report.errors)} failed"
    if report.warnings:
        summary += f", {len(report.warnings)} partial (created but not deleted)"

    lines = [summary, "", "Successes:"]
    lines.extend(template.format(**result.model_dump()) for result in report.results)

    if report.warnings:
        lines.extend(["", "Partial Successes (created but not deleted from source):"])
        for w in report.warnings:
            lines.append(
                f'- Task "{w.title}" copied to list "{w.item.get("target_task_list_id")}" as {w.new_task_id} '
                f'but not removed from "{w.item.get("source_task_list_id")}"'
            )

    if report.errors:
        lines.extend(["", "Errors:"])
        lines.extend(f"- Failed to {verb}: {e.error}" for e in report.errors)

    return "\n".join(lines)


def _format_reorganize_report(report: ReorganizeReport) -> str:
    """Render a reorganize run (dry or live) as text."""
    lines = []

    if report.dry_run:
        lines.append(f"Would move {len(report.plans)} tasks:")
        for plan in report.plans:
            lines.append(
                f'- "{plan.task.title}" from "{plan.task.task_list_title or "Unknown list"}" '
                f'to "{plan.target_task_list_title}"'
            )
    else:
        lines.append(f"Moving {len(report.plans)} tasks:")
        # Task IDs are only unique within a list
        source_titles = {
            (p.task.task_list_id, p.task.id): p.task.task_list_title or "Unknown list" for p in report.plans
        }
        target_titles = {(p.task.task_list_id, p.task.id): p.target_task_list_title for p in report.plans}
        for outcome in report.moved:
            key = (outcome.source_task_list_id, outcome.original_task_id)
            lines.append(f'- Moved "{outcome.title}" from "{source_titles.get(key)}" to "{target_titles.get(key)}"')
        for outcome in report.partial:
            key = (outcome.source_task_list_id, outcome.original_task_id)
            lines.append(
                f'- PARTIAL "{outcome.title}" copied to "{target_titles.get(key)}" as {outcome.new_task_id} '
                f'but not removed from "{source_titles.get(key)}"'
            )
        for failure in report.failed:
            lines.append(f'- FAILED to move "{failure["title"]}": {failure["error"]}')

    if report.warnings:
        lines.append("")
        lines.extend(f"Warning: {w}" for w in report.warnings)

    if not report.dry_run:
        summary = f"Summary: {len(report.moved)} tasks moved successfully, {len(report.failed)} failed"
        if report.partial:
            summary += f", {len(report.partial)} partial (created but not deleted)"
        lines.extend(["", summary + "."])

    return "\n".join(lines)

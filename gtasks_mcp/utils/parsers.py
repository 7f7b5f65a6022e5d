"""Parser helpers for Google Tasks API payloads."""

from typing import Any

from gtasks_mcp.models.task import TaskListModel, TaskModel


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Task resource from the Google Tasks API

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(response: dict[str, Any]) -> list[TaskModel]:
    """
    Parse the ``items`` of a tasks.list response into TaskModel instances.

    Args:
        response: Decoded tasks.list response body

    Returns:
        List of TaskModel instances (empty if the list has no tasks)
    """
    return [TaskModel.model_validate(t) for t in response.get("items") or []]


def _parse_task_lists(response: dict[str, Any]) -> list[TaskListModel]:
    """Parse the ``items`` of a tasklists.list response."""
    return [TaskListModel.model_validate(t) for t in response.get("items") or []]


def _attach_list(tasks: list[TaskModel], task_list: TaskListModel) -> list[TaskModel]:
    """Record on each task which list it was fetched from."""
    for task in tasks:
        task.task_list_id = task_list.id
        task.task_list_title = task_list.title
    return tasks


def _task_body(
    title: str | None,
    notes: str | None = None,
    due: str | None = None,
    status: str | None = None,
) -> dict[str, Any]:
    """
    Build the request body for inserting a task.

    Notes default to an empty string and status to needsAction; due is
    omitted when absent. Parent is never part of the body.
    """
    body: dict[str, Any] = {
        "title": title,
        "notes": notes or "",
        "status": status or "needsAction",
    }
    if due:
        body["due"] = due
    return body

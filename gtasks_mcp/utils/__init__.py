"""Utility functions for Google Tasks MCP."""

from gtasks_mcp.utils.api import TasksClient, get_client, set_client
from gtasks_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _text_result,
)
from gtasks_mcp.utils.parsers import _parse_task, _parse_tasks

__all__ = [
    "TasksClient",
    "get_client",
    "set_client",
    "_parse_task",
    "_parse_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_text_result",
]

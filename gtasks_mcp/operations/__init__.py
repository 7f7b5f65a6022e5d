"""Multi-step task workflows built on the Google Tasks API client."""

from gtasks_mcp.operations.batch import (
    batch_create_task_lists,
    batch_create_tasks,
    batch_delete_task_lists,
    batch_delete_tasks,
    batch_move_tasks,
    batch_update_task_lists,
    batch_update_tasks,
)
from gtasks_mcp.operations.listing import (
    collect_tasks,
    fetch_task_lists,
    find_task,
    list_task_resources,
    search_tasks,
)
from gtasks_mcp.operations.reorganize import plan_reorganization, reorganize_tasks
from gtasks_mcp.operations.subtasks import batch_create_subtasks, create_subtask, list_subtasks, make_subtask
from gtasks_mcp.operations.transfer import transfer_task

__all__ = [
    "collect_tasks",
    "fetch_task_lists",
    "find_task",
    "list_task_resources",
    "search_tasks",
    "transfer_task",
    "plan_reorganization",
    "reorganize_tasks",
    "batch_create_tasks",
    "batch_update_tasks",
    "batch_delete_tasks",
    "batch_move_tasks",
    "batch_create_task_lists",
    "batch_update_task_lists",
    "batch_delete_task_lists",
    "make_subtask",
    "create_subtask",
    "list_subtasks",
    "batch_create_subtasks",
]

"""MCP tool definitions for Google Tasks."""

# Import all tools to register them with the MCP server
from gtasks_mcp.tools.batch import (
    gtasks_batch_create_task_lists,
    gtasks_batch_create_tasks,
    gtasks_batch_delete_task_lists,
    gtasks_batch_delete_tasks,
    gtasks_batch_move_tasks,
    gtasks_batch_update_task_lists,
    gtasks_batch_update_tasks,
    gtasks_reorganize,
)
from gtasks_mcp.tools.core import (
    gtasks_clear,
    gtasks_create,
    gtasks_delete,
    gtasks_list,
    gtasks_list_task_lists,
    gtasks_move_task,
    gtasks_search,
    gtasks_update,
)
from gtasks_mcp.tools.subtasks import (
    gtasks_batch_create_subtasks,
    gtasks_create_subtask,
    gtasks_list_subtasks,
    gtasks_make_subtask,
)

__all__ = [
    # Core tools
    "gtasks_search",
    "gtasks_list",
    "gtasks_create",
    "gtasks_update",
    "gtasks_delete",
    "gtasks_clear",
    "gtasks_list_task_lists",
    "gtasks_move_task",
    # Batch tools
    "gtasks_reorganize",
    "gtasks_batch_create_tasks",
    "gtasks_batch_update_tasks",
    "gtasks_batch_delete_tasks",
    "gtasks_batch_move_tasks",
    "gtasks_batch_create_task_lists",
    "gtasks_batch_update_task_lists",
    "gtasks_batch_delete_task_lists",
    # Subtask tools
    "gtasks_make_subtask",
    "gtasks_create_subtask",
    "gtasks_list_subtasks",
    "gtasks_batch_create_subtasks",
]

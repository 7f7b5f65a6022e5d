"""
MCP Server for Google Tasks.

This server exposes Google Tasks to AI agents: searching, listing, creating,
updating and deleting tasks, moving tasks between lists, prefix-based
reorganization, batch operations and subtasks.
"""

# Re-export enums and errors
from gtasks_mcp.enums import ResponseFormat, TaskStatus
from gtasks_mcp.errors import (
    ConfigError,
    CreateFailedError,
    GTasksError,
    NotFoundError,
    RemoteCallError,
    ReparentError,
    VerificationError,
)

# Re-export models
from gtasks_mcp.models import (
    BatchCreateSubtaskItem,
    BatchCreateSubtasksInput,
    BatchCreateTaskItem,
    BatchCreateTaskListItem,
    BatchCreateTaskListsInput,
    BatchCreateTasksInput,
    BatchDeleteTaskItem,
    BatchDeleteTaskListItem,
    BatchDeleteTaskListsInput,
    BatchDeleteTasksInput,
    BatchMoveTaskItem,
    BatchMoveTasksInput,
    BatchReport,
    BatchUpdateTaskItem,
    BatchUpdateTaskListItem,
    BatchUpdateTaskListsInput,
    BatchUpdateTasksInput,
    ClearTasksInput,
    CreateSubtaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    ListSubtasksInput,
    ListTaskListsInput,
    ListTasksInput,
    MakeSubtaskInput,
    MovePlan,
    MoveTaskInput,
    ReorganizeReport,
    ReorganizeTasksInput,
    SearchTasksInput,
    TaskListModel,
    TaskModel,
    TransferOutcome,
    UpdateTaskInput,
)

# Re-export MCP server instance
from gtasks_mcp.server import mcp, read_task_resource

# Re-export tools
from gtasks_mcp.tools import (
    gtasks_batch_create_subtasks,
    gtasks_batch_create_task_lists,
    gtasks_batch_create_tasks,
    gtasks_batch_delete_task_lists,
    gtasks_batch_delete_tasks,
    gtasks_batch_move_tasks,
    gtasks_batch_update_task_lists,
    gtasks_batch_update_tasks,
    gtasks_clear,
    gtasks_create,
    gtasks_create_subtask,
    gtasks_delete,
    gtasks_list,
    gtasks_list_subtasks,
    gtasks_list_task_lists,
    gtasks_make_subtask,
    gtasks_move_task,
    gtasks_reorganize,
    gtasks_search,
    gtasks_update,
)

# Re-export utilities (including private functions used by tests)
from gtasks_mcp.utils import (
    TasksClient,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_task,
    _parse_tasks,
    get_client,
    set_client,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    # Errors
    "GTasksError",
    "ConfigError",
    "NotFoundError",
    "VerificationError",
    "RemoteCallError",
    "CreateFailedError",
    "ReparentError",
    # Task models
    "TaskModel",
    "TaskListModel",
    # Input models
    "SearchTasksInput",
    "ListTasksInput",
    "CreateTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ClearTasksInput",
    "ListTaskListsInput",
    "MoveTaskInput",
    "ReorganizeTasksInput",
    "BatchCreateTaskItem",
    "BatchUpdateTaskItem",
    "BatchDeleteTaskItem",
    "BatchMoveTaskItem",
    "BatchCreateTaskListItem",
    "BatchUpdateTaskListItem",
    "BatchDeleteTaskListItem",
    "BatchCreateSubtaskItem",
    "BatchCreateTasksInput",
    "BatchUpdateTasksInput",
    "BatchDeleteTasksInput",
    "BatchMoveTasksInput",
    "BatchCreateTaskListsInput",
    "BatchUpdateTaskListsInput",
    "BatchDeleteTaskListsInput",
    "MakeSubtaskInput",
    "CreateSubtaskInput",
    "ListSubtasksInput",
    "BatchCreateSubtasksInput",
    # Result models
    "TransferOutcome",
    "MovePlan",
    "ReorganizeReport",
    "BatchReport",
    # Client
    "TasksClient",
    "get_client",
    "set_client",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
    "gtasks_search",
    "gtasks_list",
    "gtasks_create",
    "gtasks_update",
    "gtasks_delete",
    "gtasks_clear",
    "gtasks_list_task_lists",
    "gtasks_move_task",
    "gtasks_reorganize",
    "gtasks_batch_create_tasks",
    "gtasks_batch_update_tasks",
    "gtasks_batch_delete_tasks",
    "gtasks_batch_move_tasks",
    "gtasks_batch_create_task_lists",
    "gtasks_batch_update_task_lists",
    "gtasks_batch_delete_task_lists",
    "gtasks_make_subtask",
    "gtasks_create_subtask",
    "gtasks_list_subtasks",
    "gtasks_batch_create_subtasks",
    # MCP server instance
    "mcp",
    "read_task_resource",
]

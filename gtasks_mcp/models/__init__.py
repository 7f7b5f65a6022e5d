"""Pydantic models for Google Tasks MCP."""

from gtasks_mcp.models.inputs import (
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
    MoveTaskInput,
    ReorganizeTasksInput,
    SearchTasksInput,
    UpdateTaskInput,
)
from gtasks_mcp.models.results import (
    BatchError,
    BatchReport,
    BatchResult,
    BatchWarning,
    MovePlan,
    ReorganizeReport,
    TransferOutcome,
)
from gtasks_mcp.models.task import TaskListModel, TaskModel

__all__ = [
    # Task models
    "TaskModel",
    "TaskListModel",
    # Single task input models
    "SearchTasksInput",
    "ListTasksInput",
    "CreateTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ClearTasksInput",
    "ListTaskListsInput",
    "MoveTaskInput",
    "ReorganizeTasksInput",
    # Batch element models
    "BatchCreateTaskItem",
    "BatchUpdateTaskItem",
    "BatchDeleteTaskItem",
    "BatchMoveTaskItem",
    "BatchCreateTaskListItem",
    "BatchUpdateTaskListItem",
    "BatchDeleteTaskListItem",
    "BatchCreateSubtaskItem",
    # Batch input models
    "BatchCreateTasksInput",
    "BatchUpdateTasksInput",
    "BatchDeleteTasksInput",
    "BatchMoveTasksInput",
    "BatchCreateTaskListsInput",
    "BatchUpdateTaskListsInput",
    "BatchDeleteTaskListsInput",
    # Subtask input models
    "MakeSubtaskInput",
    "CreateSubtaskInput",
    "ListSubtasksInput",
    "BatchCreateSubtasksInput",
    # Result models
    "TransferOutcome",
    "MovePlan",
    "ReorganizeReport",
    "BatchResult",
    "BatchError",
    "BatchWarning",
    "BatchReport",
]

"""Input models for Google Tasks MCP tools."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gtasks_mcp.config import DEFAULT_LIST_ID
from gtasks_mcp.enums import ResponseFormat, TaskStatus


def _require_items(v: list[Any], name: str) -> list[Any]:
    if not v:
        raise ValueError(f"{name} array is required and must not be empty")
    return v


# ============================================================================
# Single Task Input Models
# ============================================================================


class SearchTasksInput(BaseModel):
    """Input model for searching tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    query: str = Field(..., description="Text to look for in task titles and notes (case-insensitive)", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


class ListTasksInput(BaseModel):
    """Input model for listing tasks across all task lists."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


class CreateTaskInput(BaseModel):
    """Input model for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")
    title: str = Field(..., description="Task title (required)", max_length=1024)
    notes: str | None = Field(default=None, description="Task notes")
    due: str | None = Field(default=None, description="Due date as an RFC 3339 timestamp (e.g., '2025-01-31T00:00:00Z')")
    status: TaskStatus | None = Field(default=None, description="Task status: needsAction or completed")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task title is required")
        return v.strip()


class UpdateTaskInput(BaseModel):
    """Input model for updating a task. Only supplied fields are changed."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")
    task_id: str = Field(..., description="ID of the task to update", min_length=1)
    title: str | None = Field(default=None, description="New task title")
    notes: str | None = Field(default=None, description="New task notes (empty string clears them)")
    status: TaskStatus | None = Field(default=None, description="New status: needsAction or completed")
    due: str | None = Field(default=None, description="New due date as an RFC 3339 timestamp")


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")
    task_id: str = Field(..., description="ID of the task to delete", min_length=1)


class ClearTasksInput(BaseModel):
    """Input model for clearing completed tasks from a list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")


class ListTaskListsInput(BaseModel):
    """Input model for listing task lists."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class MoveTaskInput(BaseModel):
    """Input model for moving a task to another list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    source_task_list_id: str = Field(..., description="Task list ID the task is in now", min_length=1)
    target_task_list_id: str = Field(..., description="Task list ID to move the task to", min_length=1)
    task_id: str = Field(..., description="ID of the task to move", min_length=1)


class ReorganizeTasksInput(BaseModel):
    """Input model for prefix-based reorganization."""

    model_config = ConfigDict(str_strip_whitespace=True)

    prefix_mappings: dict[str, str] = Field(
        ...,
        description='Mapping of title prefixes to task list titles, e.g. {"ADMIN": "Admin Tasks"}',
    )
    dry_run: bool = Field(default=False, description="Only report what would be moved, without changing anything")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )

    @field_validator("prefix_mappings")
    @classmethod
    def validate_prefix_mappings(cls, v: dict[str, str]) -> dict[str, str]:
        if not v:
            raise ValueError("Prefix mappings are required and must not be empty")
        return v


# ============================================================================
# Batch Element Models
#
# Every field is optional here: missing required fields are reported per
# element by the batch executors instead of rejecting the whole batch.
# ============================================================================


class BatchCreateTaskItem(BaseModel):
    """One task to create in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str | None = Field(default=None, description="Task list ID (defaults to '@default')")
    title: str | None = Field(default=None, description="Task title (required)")
    notes: str | None = Field(default=None, description="Task notes")
    due: str | None = Field(default=None, description="Due date as an RFC 3339 timestamp")
    status: TaskStatus | None = Field(default=None, description="Task status")


class BatchUpdateTaskItem(BaseModel):
    """One task to update in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str | None = Field(default=None, description="Task list ID (required)")
    task_id: str | None = Field(default=None, description="Task ID (required)")
    title: str | None = Field(default=None, description="New task title")
    notes: str | None = Field(default=None, description="New task notes")
    due: str | None = Field(default=None, description="New due date")
    status: TaskStatus | None = Field(default=None, description="New task status")


class BatchDeleteTaskItem(BaseModel):
    """One task to delete in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str | None = Field(default=None, description="Task list ID (required)")
    task_id: str | None = Field(default=None, description="Task ID (required)")


class BatchMoveTaskItem(BaseModel):
    """One task to move in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    source_task_list_id: str | None = Field(default=None, description="Source task list ID (required)")
    target_task_list_id: str | None = Field(default=None, description="Target task list ID (required)")
    task_id: str | None = Field(default=None, description="Task ID (required)")


class BatchCreateTaskListItem(BaseModel):
    """One task list to create in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, description="List title (required)")


class BatchUpdateTaskListItem(BaseModel):
    """One task list to rename in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    list_id: str | None = Field(default=None, description="List ID (required)")
    title: str | None = Field(default=None, description="New list title (required)")


class BatchDeleteTaskListItem(BaseModel):
    """One task list to delete in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    list_id: str | None = Field(default=None, description="List ID (required)")


class BatchCreateSubtaskItem(BaseModel):
    """One subtask to create in a batch."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str | None = Field(default=None, description="Task list ID (defaults to '@default')")
    parent_task_id: str | None = Field(default=None, description="Parent task ID (required)")
    title: str | None = Field(default=None, description="Task title (required)")
    notes: str | None = Field(default=None, description="Task notes")
    due: str | None = Field(default=None, description="Due date as an RFC 3339 timestamp")
    status: TaskStatus | None = Field(default=None, description="Task status")


# ============================================================================
# Batch Input Models
# ============================================================================


class BatchCreateTasksInput(BaseModel):
    """Input model for creating several tasks at once."""

    tasks: list[BatchCreateTaskItem] = Field(..., description="Tasks to create, optionally in different lists")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("tasks")
    @classmethod
    def validate_tasks(cls, v: list[BatchCreateTaskItem]) -> list[BatchCreateTaskItem]:
        return _require_items(v, "tasks")


class BatchUpdateTasksInput(BaseModel):
    """Input model for updating several tasks at once."""

    tasks: list[BatchUpdateTaskItem] = Field(..., description="Tasks to update")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("tasks")
    @classmethod
    def validate_tasks(cls, v: list[BatchUpdateTaskItem]) -> list[BatchUpdateTaskItem]:
        return _require_items(v, "tasks")


class BatchDeleteTasksInput(BaseModel):
    """Input model for deleting several tasks at once."""

    tasks: list[BatchDeleteTaskItem] = Field(..., description="Tasks to delete")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("tasks")
    @classmethod
    def validate_tasks(cls, v: list[BatchDeleteTaskItem]) -> list[BatchDeleteTaskItem]:
        return _require_items(v, "tasks")


class BatchMoveTasksInput(BaseModel):
    """Input model for moving several tasks between lists at once."""

    tasks: list[BatchMoveTaskItem] = Field(..., description="Tasks to move")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("tasks")
    @classmethod
    def validate_tasks(cls, v: list[BatchMoveTaskItem]) -> list[BatchMoveTaskItem]:
        return _require_items(v, "tasks")


class BatchCreateTaskListsInput(BaseModel):
    """Input model for creating several task lists at once."""

    lists: list[BatchCreateTaskListItem] = Field(..., description="Task lists to create")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("lists")
    @classmethod
    def validate_lists(cls, v: list[BatchCreateTaskListItem]) -> list[BatchCreateTaskListItem]:
        return _require_items(v, "lists")


class BatchUpdateTaskListsInput(BaseModel):
    """Input model for renaming several task lists at once."""

    lists: list[BatchUpdateTaskListItem] = Field(..., description="Task lists to update")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("lists")
    @classmethod
    def validate_lists(cls, v: list[BatchUpdateTaskListItem]) -> list[BatchUpdateTaskListItem]:
        return _require_items(v, "lists")


class BatchDeleteTaskListsInput(BaseModel):
    """Input model for deleting several task lists at once."""

    lists: list[BatchDeleteTaskListItem] = Field(..., description="Task lists to delete")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("lists")
    @classmethod
    def validate_lists(cls, v: list[BatchDeleteTaskListItem]) -> list[BatchDeleteTaskListItem]:
        return _require_items(v, "lists")


# ============================================================================
# Subtask Input Models
# ============================================================================


class MakeSubtaskInput(BaseModel):
    """Input model for making an existing task a subtask of another."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(..., description="Task list ID containing both tasks", min_length=1)
    task_id: str = Field(..., description="ID of the task to turn into a subtask", min_length=1)
    parent_task_id: str = Field(..., description="ID of the new parent task", min_length=1)


class CreateSubtaskInput(BaseModel):
    """Input model for creating a new subtask."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")
    parent_task_id: str = Field(..., description="Parent task ID", min_length=1)
    title: str = Field(..., description="Task title", min_length=1, max_length=1024)
    notes: str | None = Field(default=None, description="Task notes")
    due: str | None = Field(default=None, description="Due date as an RFC 3339 timestamp")
    status: TaskStatus | None = Field(default=None, description="Task status")


class ListSubtasksInput(BaseModel):
    """Input model for listing the subtasks of a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_list_id: str = Field(default=DEFAULT_LIST_ID, description="Task list ID ('@default' for the default list)")
    parent_task_id: str = Field(..., description="Parent task ID", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


class BatchCreateSubtasksInput(BaseModel):
    """Input model for creating several subtasks at once."""

    subtasks: list[BatchCreateSubtaskItem] = Field(
        ..., description="Subtasks to create, possibly under different parents"
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN, description="Output format: 'markdown' or 'json'"
    )

    @field_validator("subtasks")
    @classmethod
    def validate_subtasks(cls, v: list[BatchCreateSubtaskItem]) -> list[BatchCreateSubtaskItem]:
        return _require_items(v, "subtasks")

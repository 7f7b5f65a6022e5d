"""Result models for multi-step task workflows."""

from typing import Any

from pydantic import BaseModel, Field

from gtasks_mcp.models.task import TaskModel


class TransferOutcome(BaseModel):
    """Outcome of copying a task to another list and deleting the original.

    ``source_removed`` is False for a partial success: the copy exists in the
    target list but the original could not be deleted.
    """

    title: str
    original_task_id: str
    new_task_id: str
    source_task_list_id: str
    target_task_list_id: str
    source_removed: bool = True
    warning: str | None = None


class MovePlan(BaseModel):
    """A planned prefix-routed move of one task."""

    task: TaskModel
    target_task_list_id: str
    target_task_list_title: str
    prefix: str


class ReorganizeReport(BaseModel):
    """Plans and per-task outcomes of a reorganize run."""

    dry_run: bool
    plans: list[MovePlan] = Field(default_factory=list)
    moved: list[TransferOutcome] = Field(default_factory=list)
    partial: list[TransferOutcome] = Field(default_factory=list)
    failed: list[dict[str, str]] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class BatchResult(BaseModel):
    """A successfully processed batch element."""

    title: str | None = None
    task_id: str | None = None
    task_list_id: str | None = None
    parent_task_id: str | None = None
    original_task_id: str | None = None
    new_task_id: str | None = None
    source_task_list_id: str | None = None
    target_task_list_id: str | None = None
    list_id: str | None = None


class BatchError(BaseModel):
    """A batch element that failed, with the descriptor it was given."""

    error: str
    item: dict[str, Any]


class BatchWarning(BaseModel):
    """A batch move element that was copied but not removed from its source."""

    warning: str
    item: dict[str, Any]
    title: str
    original_task_id: str
    new_task_id: str


class BatchReport(BaseModel):
    """Partitioned outcome of a batch operation.

    Every input element lands in exactly one of results, errors or warnings.
    """

    operation: str
    results: list[BatchResult] = Field(default_factory=list)
    errors: list[BatchError] = Field(default_factory=list)
    warnings: list[BatchWarning] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results) + len(self.errors) + len(self.warnings)

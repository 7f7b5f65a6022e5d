"""Core task and task list models for Google Tasks MCP."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskModel(BaseModel):
    """Model representing a Google Tasks task with all its attributes."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    title: str | None = None
    notes: str | None = None
    due: str | None = None
    status: str | None = None
    parent: str | None = None

    # Bookkeeping fields assigned by the API, passed through untouched
    kind: str | None = None
    etag: str | None = None
    updated: str | None = None
    self_link: str | None = Field(default=None, alias="selfLink")
    position: str | None = None
    completed: str | None = None
    deleted: bool | None = None
    hidden: bool | None = None
    links: list[dict[str, Any]] = Field(default_factory=list)

    # Attached locally during enumeration, never sent to the API
    task_list_id: str | None = None
    task_list_title: str | None = None


class TaskListModel(BaseModel):
    """Model representing a Google Tasks task list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    title: str | None = None
    updated: str | None = None
    kind: str | None = None
    etag: str | None = None
    self_link: str | None = Field(default=None, alias="selfLink")

"""Enums for Google Tasks MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task, for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Task status values accepted by the Google Tasks API."""

    NEEDS_ACTION = "needsAction"
    COMPLETED = "completed"

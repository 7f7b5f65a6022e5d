"""Exception hierarchy for Google Tasks MCP."""


class GTasksError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(GTasksError):
    """Raised when no usable API credentials are configured."""


class NotFoundError(GTasksError):
    """A required remote task or task list could not be fetched."""


class VerificationError(NotFoundError):
    """A task referenced by a subtask operation does not exist in the list."""


class RemoteCallError(GTasksError):
    """An insert, update, delete, move or list call to the API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CreateFailedError(RemoteCallError):
    """Inserting a task into the destination list did not yield a task ID."""


class ReparentError(RemoteCallError):
    """The remote move call that sets a task's parent failed."""

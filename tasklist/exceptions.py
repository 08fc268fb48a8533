"""Error types shared by the gateway and the task service."""

from enum import Enum


class ErrorKind(str, Enum):
    """Which downstream dependency a failure came from."""

    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    STORAGE_UNREACHABLE = "storage_unreachable"


class TaskListError(Exception):
    """Base exception for all task list errors.

    Attributes:
        message: Human-readable description, rendered only at the HTTP boundary.
        code: Short machine-readable error code.
        kind: Error kind of the failing dependency.
    """

    kind: ErrorKind | None = None

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

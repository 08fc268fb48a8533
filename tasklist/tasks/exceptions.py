"""Task service exceptions."""

from tasklist.exceptions import ErrorKind, TaskListError


class StorageUnavailableError(TaskListError):
    """Raised when the task store cannot be reached or answers with an error.
    
    Attributes:
        operation: Store operation that failed.
        reason: Description of the underlying failure.
    """

    kind = ErrorKind.STORAGE_UNREACHABLE
    
    def __init__(self, operation: str, reason: str = "Connection failed"):
        super().__init__(
            message=f"Task store unavailable during {operation}: {reason}",
            code="STORAGE_UNAVAILABLE"
        )
        self.operation = operation
        self.reason = reason

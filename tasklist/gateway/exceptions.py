"""Custom exceptions for the task list gateway."""

from tasklist.exceptions import ErrorKind, TaskListError


class GatewayError(TaskListError):
    """Base exception for failures reaching the task service."""

    kind = ErrorKind.UPSTREAM_UNREACHABLE


class BackendTimeoutError(GatewayError):
    """Raised when the task service doesn't respond in time.
    
    Attributes:
        backend_url: URL of the backend that timed out.
        timeout_seconds: Timeout duration that was exceeded.
    """
    
    def __init__(self, backend_url: str, timeout_seconds: float):
        super().__init__(
            message=f"Task service at '{backend_url}' timed out after {timeout_seconds}s",
            code="BACKEND_TIMEOUT"
        )
        self.backend_url = backend_url
        self.timeout_seconds = timeout_seconds


class BackendUnavailableError(GatewayError):
    """Raised when the task service is unreachable.
    
    Attributes:
        backend_url: URL of the unreachable backend.
        reason: Description of the connection failure.
    """
    
    def __init__(self, backend_url: str, reason: str = "Connection failed"):
        super().__init__(
            message=f"Task service at '{backend_url}' is unavailable: {reason}",
            code="BACKEND_UNAVAILABLE"
        )
        self.backend_url = backend_url
        self.reason = reason


class BackendError(GatewayError):
    """Raised when the task service returns an error response.

    The backend body is kept off the message so it never reaches the client.
    
    Attributes:
        backend_url: URL of the backend that returned an error.
        status_code: HTTP status code from backend.
    """
    
    def __init__(self, backend_url: str, status_code: int):
        super().__init__(
            message=f"Task service at '{backend_url}' returned error {status_code}",
            code="BACKEND_ERROR"
        )
        self.backend_url = backend_url
        self.status_code = status_code


class InvalidBackendResponseError(GatewayError):
    """Raised when the task service labels a body as JSON but it doesn't parse.
    
    Attributes:
        backend_url: URL of the backend that sent the body.
    """
    
    def __init__(self, backend_url: str):
        super().__init__(
            message=f"Task service at '{backend_url}' sent an invalid JSON response",
            code="BACKEND_INVALID_RESPONSE"
        )
        self.backend_url = backend_url

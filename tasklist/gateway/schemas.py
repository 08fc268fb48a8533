"""Gateway data shapes."""

from typing import Any, NamedTuple


class BackendResponse(NamedTuple):
    """Successful response decoded from the task service.
    
    Attributes:
        status_code: HTTP status returned by the backend.
        body: Parsed JSON when the backend sent JSON, its text otherwise.
    """
    
    status_code: int
    body: Any

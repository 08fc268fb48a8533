"""Gateway module - public routes relayed to the task service."""

from .schemas import BackendResponse
from .exceptions import (
    GatewayError,
    BackendTimeoutError,
    BackendUnavailableError,
    BackendError,
    InvalidBackendResponseError,
)
from .proxy import forward_to_backend
from .router import router


__all__ = [
    # Schemas
    "BackendResponse",
    # Exceptions
    "GatewayError",
    "BackendTimeoutError",
    "BackendUnavailableError",
    "BackendError",
    "InvalidBackendResponseError",
    # Proxy
    "forward_to_backend",
    # Router
    "router",
]

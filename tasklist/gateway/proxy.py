"""HTTP proxy client for forwarding requests to the task service."""

import uuid

import httpx
from structlog import get_logger

from .schemas import BackendResponse
from .exceptions import (
    BackendTimeoutError,
    BackendUnavailableError,
    BackendError,
    InvalidBackendResponseError,
)

logger = get_logger(__name__)

# Default timeout for backend requests
DEFAULT_TIMEOUT_SECONDS = 10.0


async def forward_to_backend(
    client: httpx.AsyncClient,
    method: str,
    backend_url: str,
    body: bytes | None = None,
    content_type: str | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    request_id: str | None = None,
) -> BackendResponse:
    """Forward one request to the task service.
    
    Exactly one outbound request is issued, with the same method and the
    same raw body. DELETE carries its body explicitly. Nothing is retried.
    
    Args:
        client: Shared HTTP client.
        method: HTTP method of the inbound request.
        backend_url: Full URL of the task service endpoint.
        body: Raw inbound request body, if any.
        content_type: Content-Type of the inbound body.
        timeout: Request timeout in seconds.
        request_id: Optional trace ID (generated if not provided).
        
    Returns:
        BackendResponse with the backend status and decoded body.
        
    Raises:
        BackendTimeoutError: If backend doesn't respond in time.
        BackendUnavailableError: If backend connection fails.
        BackendError: If backend returns HTTP error status.
        InvalidBackendResponseError: If a JSON body fails to parse.
    """
    if request_id is None:
        request_id = str(uuid.uuid4())
    
    headers = {"X-Request-ID": request_id}
    if content_type:
        headers["Content-Type"] = content_type
    
    try:
        response = await client.request(
            method,
            backend_url,
            content=body or None,
            headers=headers,
            timeout=timeout,
        )
    except httpx.TimeoutException:
        raise BackendTimeoutError(
            backend_url=backend_url,
            timeout_seconds=timeout
        )
    except httpx.ConnectError as e:
        raise BackendUnavailableError(
            backend_url=backend_url,
            reason=str(e) or "Connection failed"
        )
    except httpx.RequestError as e:
        raise BackendUnavailableError(
            backend_url=backend_url,
            reason=f"Request failed: {e}"
        )
    
    # Backend error statuses are failures too; the body is dropped
    if response.status_code >= 400:
        raise BackendError(
            backend_url=backend_url,
            status_code=response.status_code,
        )
    
    logger.info(
        "request_forwarded",
        method=method,
        backend_url=backend_url,
        status_code=response.status_code,
        request_id=request_id,
    )
    
    # JSON bodies are decoded, anything else is relayed as its text
    if "json" in response.headers.get("content-type", ""):
        try:
            body = response.json()
        except ValueError:
            raise InvalidBackendResponseError(backend_url=backend_url)
    else:
        body = response.text
    
    return BackendResponse(status_code=response.status_code, body=body)

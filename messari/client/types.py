"""
Type definitions for the Messari SDK.

This module contains the Pydantic models used for configuration, request
options, response envelopes and lifecycle events, plus the exception
hierarchy raised by the client.
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import BaseModel, Field

from messari.logger import Logger, LogLevel


DEFAULT_BASE_URL = "https://api.messari.io"
DEFAULT_TIMEOUT_MS = 60_000
API_KEY_HEADER = "x-messari-api-key"


# ---------------------------------------------------------------------------
# Lifecycle events
# ---------------------------------------------------------------------------

ClientEventType = Literal["request", "response", "error"]


class ClientRequestEvent(BaseModel):
    """Emitted before every request is sent.

    Attributes:
        method: HTTP method
        path: Request path (without base URL or query string)
        query_params: Query parameters used for the request
    """

    method: str
    path: str
    query_params: dict[str, Any] = Field(default_factory=dict)


class ClientResponseEvent(BaseModel):
    """Emitted after a successful (2xx) response was decoded.

    Attributes:
        method: HTTP method
        path: Request path
        status: HTTP status code
        data: The full response envelope
    """

    method: str
    path: str
    status: int
    data: Any = None


class RequestSummary(BaseModel):
    """The request an error event refers to."""

    method: str
    path: str
    query_params: dict[str, Any] = Field(default_factory=dict)


class ClientErrorEvent(BaseModel):
    """Emitted when a request fails for any reason.

    Attributes:
        error: The exception that will be raised to the caller
        request: The request that failed
    """

    error: BaseException
    request: RequestSummary | None = None

    model_config = {"arbitrary_types_allowed": True}


ClientEvent = ClientRequestEvent | ClientResponseEvent | ClientErrorEvent
ClientEventHandler = Callable[[Any], None]


# ---------------------------------------------------------------------------
# Configuration and request types
# ---------------------------------------------------------------------------


class MessariClientOptions(BaseModel):
    """Configuration options for initializing the MessariClient.

    Attributes:
        api_key: Your Messari API key
        base_url: Base URL for the API. Defaults to "https://api.messari.io"
        timeout_ms: Per-request deadline in milliseconds. Defaults to 60000
        log_level: Minimum level the client logs at. Defaults to INFO
        logger: Custom logger callable used instead of the console logger
        disable_logging: Discard all log output (overrides logger and log_level)
        default_headers: Headers sent with every request
        on_error: Handler registered for ``error`` events
        on_request: Handler registered for ``request`` events
        on_response: Handler registered for ``response`` events
        http_client: Shared ``httpx.AsyncClient``; the SDK will not close it
    """

    api_key: str = Field(..., min_length=1, description="Your Messari API key")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for the Messari API",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Per-request timeout in milliseconds",
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    logger: Logger | None = Field(default=None, description="Custom logger")
    disable_logging: bool = Field(default=False, description="Disable all logging")
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers included with every request",
    )
    on_error: ClientEventHandler | None = None
    on_request: ClientEventHandler | None = None
    on_response: ClientEventHandler | None = None
    http_client: Any = Field(
        default=None,
        description="Reusable httpx.AsyncClient (connection pooling, custom transports)",
    )

    model_config = {"arbitrary_types_allowed": True}


class RequestOptions(BaseModel):
    """Per-call request options.

    Unknown fields are passed through to ``httpx.AsyncClient.request``
    (for example ``follow_redirects`` or ``extensions``).

    Attributes:
        timeout_ms: Deadline for this call, overriding the client default
        headers: Headers merged over the client defaults
    """

    timeout_ms: int | None = Field(default=None, gt=0)
    headers: dict[str, str] | None = None

    model_config = {"extra": "allow"}

    @property
    def passthrough(self) -> dict[str, Any]:
        """Transport keyword arguments supplied as extra fields."""
        return dict(self.model_extra or {})


class RequestParameters(BaseModel):
    """Everything needed to perform one HTTP round trip."""

    method: str
    path: str
    body: Any = None
    query_params: dict[str, Any] = Field(default_factory=dict)
    options: RequestOptions = Field(default_factory=RequestOptions)


# ---------------------------------------------------------------------------
# Response types
# ---------------------------------------------------------------------------


class ResponseEnvelope(BaseModel):
    """The ``{data, error?, metadata?}`` wrapper every response body uses."""

    data: Any = None
    error: str | None = None
    metadata: Any = None


class ResponseWithMetadata(BaseModel):
    """Payload plus metadata, as returned by ``request_with_metadata``."""

    data: Any = None
    metadata: Any = None
    error: str | None = None


class PaginationMetadata(BaseModel):
    """Normalized pagination metadata.

    Attributes:
        page: Current page number (1-based)
        limit: Page size
        total: Total number of rows reported by the server
        total_rows: Same as ``total``
        total_pages: ``ceil(total / limit)``; 0 when unknown
        has_more: Whether the server reported more rows after this page
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, gt=0)
    total: int = Field(default=0, ge=0)
    total_rows: int = Field(default=0, ge=0, alias="totalRows")
    total_pages: int = Field(default=0, ge=0, alias="totalPages")
    has_more: bool = Field(default=False, alias="hasMore")

    model_config = {"populate_by_name": True, "frozen": True}


# ---------------------------------------------------------------------------
# Error types
# ---------------------------------------------------------------------------

DEFAULT_ERROR_MESSAGE = "An error occurred"


class MessariError(Exception):
    """Base class for every error raised by the Messari SDK.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class RequestTimeoutError(MessariError):
    """The client-side deadline elapsed before the transport call settled."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(f"Request timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class APIError(MessariError):
    """The API answered with a non-2xx status.

    Attributes:
        message: The envelope's ``error`` field, or a fallback message
        status_code: HTTP status code
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} [{self.status_code}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, status_code={self.status_code!r})"


class InvalidResponseError(APIError):
    """A 2xx response body is not JSON or does not match the ``{data, error?, metadata?}`` envelope."""


class PaginationError(MessariError):
    """Base class for pagination failures."""


class PaginationRangeError(PaginationError):
    """A requested page lies outside ``[1, total_pages]``. No request is made."""

    def __init__(self, page: int, total_pages: int | None) -> None:
        upper = total_pages if total_pages else "?"
        super().__init__(f"Page {page} is out of range. Valid range: 1-{upper}")
        self.page = page
        self.total_pages = total_pages


class PaginationFetchError(PaginationError):
    """Fetching a page during navigation failed. The cause is chained."""

    def __init__(self, action: str, page: int, cause: BaseException) -> None:
        super().__init__(f"Error fetching {action}: {cause}")
        self.action = action
        self.page = page
        self.cause = cause

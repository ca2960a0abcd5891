"""
The Messari API client.
"""

from __future__ import annotations

import asyncio
import os
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

import httpx
from pydantic import ValidationError

from messari.client.endpoints import EndpointDescriptor
from messari.client.events import EventEmitter
from messari.client.pagination import PaginatedResult, Paginator
from messari.client.resources import (
    AI,
    Asset,
    Diligence,
    Exchanges,
    Fundraising,
    Intel,
    Markets,
    Networks,
    News,
    Recaps,
    Research,
    Signal,
    TokenUnlocks,
    UserManagement,
)
from messari.client.timeout import reject_after_timeout
from messari.client.types import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_ERROR_MESSAGE,
    APIError,
    ClientErrorEvent,
    ClientEventHandler,
    ClientEventType,
    ClientRequestEvent,
    ClientResponseEvent,
    InvalidResponseError,
    MessariClientOptions,
    MessariError,
    RequestOptions,
    RequestParameters,
    RequestSummary,
    ResponseEnvelope,
    ResponseWithMetadata,
)
from messari.logger import (
    Logger,
    LogLevel,
    create_filtered_logger,
    make_console_logger,
    no_op_logger,
)
from messari.utils import build_url

LOGGER_NAME = "messari-client"


class MessariClient:
    """Async client for the Messari API.

    Resources are exposed as attributes (``client.news``, ``client.intel``,
    ``client.ai`` ...). Every request is bounded by a client-side deadline,
    emits ``request``/``response``/``error`` lifecycle events and raises a
    typed error on failure. List endpoints return a
    :class:`~messari.client.pagination.PaginatedResult`.

    Example:
        >>> async with MessariClient(api_key="...") as client:
        ...     feed = await client.news.get_news_feed_paginated({"limit": 10})
        ...     print(feed.metadata.total_pages)
        ...     page_two = await feed.next_page()
    """

    def __init__(self, api_key: str | None = None, **options: Any) -> None:
        """Initialize the client.

        Args:
            api_key: Your Messari API key. Defaults to ``$MESSARI_API_KEY``
            **options: Any other :class:`MessariClientOptions` field

        Raises:
            MessariError: If no API key is available
        """
        api_key = api_key or os.getenv("MESSARI_API_KEY")
        if not api_key:
            raise MessariError(
                "An API key is required. Pass api_key or set the MESSARI_API_KEY environment variable."
            )
        options.setdefault("base_url", os.getenv("MESSARI_BASE_URL") or DEFAULT_BASE_URL)
        self.options = MessariClientOptions(api_key=api_key, **options)

        self.base_url = self.options.base_url.rstrip("/")
        self.timeout_ms = self.options.timeout_ms
        self.default_headers: dict[str, str] = {
            "Content-Type": "application/json",
            API_KEY_HEADER: api_key,
            **self.options.default_headers,
        }

        if self.options.http_client is not None:
            self._http: httpx.AsyncClient = self.options.http_client
            self._owns_http = False
        else:
            # Deadlines are enforced by reject_after_timeout, not by httpx
            self._http = httpx.AsyncClient(timeout=None)
            self._owns_http = True

        self._events = EventEmitter()
        if self.options.disable_logging:
            self._set_logger(no_op_logger, enabled=False)
        else:
            base_logger = self.options.logger or make_console_logger(LOGGER_NAME)
            self._set_logger(create_filtered_logger(base_logger, self.options.log_level), enabled=True)

        if self.options.on_error:
            self.on("error", self.options.on_error)
        if self.options.on_request:
            self.on("request", self.options.on_request)
        if self.options.on_response:
            self.on("response", self.options.on_response)

        self.ai = AI(self)
        self.asset = Asset(self)
        self.diligence = Diligence(self)
        self.exchanges = Exchanges(self)
        self.fundraising = Fundraising(self)
        self.intel = Intel(self)
        self.markets = Markets(self)
        self.networks = Networks(self)
        self.news = News(self)
        self.recaps = Recaps(self)
        self.research = Research(self)
        self.signal = Signal(self)
        self.token_unlocks = TokenUnlocks(self)
        self.user_management = UserManagement(self)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the underlying HTTP client if the SDK created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> MessariClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def logger(self) -> Logger:
        return self._logger

    def _log(self, level: LogLevel, message: str, extra: dict[str, Any] | None = None) -> None:
        # Resolves the active logger at call time
        self._logger(level, message, extra)

    def _set_logger(self, logger: Logger, enabled: bool) -> None:
        self._logger = logger
        self._logging_enabled = enabled
        self._events.logger = logger

    def disable_logging(self) -> None:
        """Discard all log output from this client."""
        self._set_logger(no_op_logger, enabled=False)

    def enable_logging(self, level: LogLevel = LogLevel.INFO) -> None:
        """Log to the console at ``level`` and above."""
        self._set_logger(create_filtered_logger(make_console_logger(LOGGER_NAME), level), enabled=True)

    def set_logger(self, logger: Logger, level: LogLevel | None = None) -> None:
        """Route log output to a custom logger, optionally filtered by ``level``."""
        self._set_logger(create_filtered_logger(logger, level) if level else logger, enabled=True)

    def is_logging_enabled(self) -> bool:
        return self._logging_enabled

    @contextmanager
    def logging_disabled(self) -> Iterator[None]:
        """Silence the client for the duration of a ``with`` block.

        The previous logger is restored afterwards.

        Example:
            >>> with client.logging_disabled():
            ...     await client.ai.create_chat_completion({"messages": messages})
        """
        previous, was_enabled = self._logger, self._logging_enabled
        self.disable_logging()
        try:
            yield
        finally:
            self._set_logger(previous, enabled=was_enabled)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on(self, event: ClientEventType, handler: ClientEventHandler) -> None:
        """Register ``handler`` for ``event`` ("request", "response" or "error")."""
        self._events.on(event, handler)

    def off(self, event: ClientEventType, handler: ClientEventHandler) -> None:
        """Remove a handler previously registered with :meth:`on`."""
        self._events.off(event, handler)

    # ------------------------------------------------------------------
    # Request execution
    # ------------------------------------------------------------------

    async def _execute(self, params: RequestParameters) -> ResponseEnvelope:
        method, path, query_params = params.method, params.path, params.query_params
        options = params.options
        url = build_url(self.base_url, path, query_params)

        self._logger(LogLevel.DEBUG, "request start", {"method": method, "url": url})
        self._events.emit("request", ClientRequestEvent(method=method, path=path, query_params=query_params))

        headers = {**self.default_headers, **(options.headers or {})}
        timeout_ms = options.timeout_ms or self.timeout_ms

        try:
            response = await reject_after_timeout(
                self._http.request(
                    method,
                    url,
                    headers=headers,
                    json=params.body,
                    **options.passthrough,
                ),
                timeout_ms,
            )

            if not response.is_success:
                error_data = _json_or_empty(response)
                self._logger(
                    LogLevel.ERROR,
                    "request error",
                    {"status": response.status_code, "reason": response.reason_phrase, "error": error_data},
                )
                message = error_data.get("error") if isinstance(error_data, dict) else None
                if not isinstance(message, str):
                    message = None
                raise APIError(message or DEFAULT_ERROR_MESSAGE, status_code=response.status_code)

            try:
                body = response.json()
                envelope = ResponseEnvelope.model_validate(body)
            except (ValueError, ValidationError) as error:
                self._logger(LogLevel.ERROR, "invalid response", {"status": response.status_code, "error": error})
                raise InvalidResponseError(
                    f"Invalid response body: {error}",
                    status_code=response.status_code,
                ) from error
        except (Exception, asyncio.CancelledError) as error:
            if not isinstance(error, APIError):
                self._logger(LogLevel.ERROR, "request failed", {"error": error})
            self._events.emit(
                "error",
                ClientErrorEvent(
                    error=error,
                    request=RequestSummary(method=method, path=path, query_params=query_params),
                ),
            )
            raise

        self._logger(LogLevel.DEBUG, "request success", {"status": response.status_code})
        self._events.emit(
            "response",
            ClientResponseEvent(method=method, path=path, status=response.status_code, data=body),
        )
        return envelope

    async def request(self, params: RequestParameters) -> Any:
        """Perform one request and return the envelope's ``data``.

        Raises:
            RequestTimeoutError: If the deadline elapses first
            APIError: If the API answers with a non-2xx status
            InvalidResponseError: If a 2xx body is not a valid response envelope
            httpx.TransportError: If the request could not be sent, unchanged
        """
        envelope = await self._execute(params)
        return envelope.data

    async def request_with_metadata(self, params: RequestParameters) -> ResponseWithMetadata:
        """Perform one request and return the envelope's ``data`` and ``metadata``."""
        envelope = await self._execute(params)
        return ResponseWithMetadata(data=envelope.data, metadata=envelope.metadata, error=envelope.error)

    # ------------------------------------------------------------------
    # Endpoint helpers used by the resources
    # ------------------------------------------------------------------

    def _parameters(
        self,
        endpoint: EndpointDescriptor,
        params: Mapping[str, Any] | None,
        options: RequestOptions | None,
    ) -> RequestParameters:
        return RequestParameters(
            method=endpoint.method,
            path=endpoint.build_path(params),
            body=endpoint.body(params),
            query_params=endpoint.query(params),
            options=options or RequestOptions(),
        )

    async def call(
        self,
        endpoint: EndpointDescriptor,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Call ``endpoint`` with ``params`` filtered through its descriptor."""
        return await self.request(self._parameters(endpoint, params, options))

    async def call_with_metadata(
        self,
        endpoint: EndpointDescriptor,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self.request_with_metadata(self._parameters(endpoint, params, options))

    async def paginate(
        self,
        endpoint: EndpointDescriptor,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """Fetch the first page of ``endpoint`` and wrap it for navigation."""

        async def fetch_page(page_params: Mapping[str, Any], page_options: RequestOptions | None) -> ResponseWithMetadata:
            return await self.call_with_metadata(endpoint, page_params, page_options)

        paginator = Paginator(fetch_page, options, logger=self._log)
        first_page = await fetch_page(params or {}, options)
        return paginator.wrap(params, first_page)


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}

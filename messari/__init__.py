"""
messari - Python SDK for the Messari crypto data API

Typed async access to Messari's AI, asset, news, intel, research,
fundraising, token unlock and market data endpoints, with client-side
deadlines, lifecycle events and page-number pagination.

Example:
    >>> from messari import MessariClient
    >>>
    >>> async with MessariClient(api_key="...") as client:
    ...     # Ask Messari's copilot a question
    ...     answer = await client.ai.create_chat_completion(
    ...         {"messages": [{"role": "user", "content": "What is the TVL of Aave?"}]}
    ...     )
    ...
    ...     # Walk the news feed page by page
    ...     feed = await client.news.get_news_feed_paginated({"limit": 25})
    ...     while feed.has_next_page:
    ...         feed = await feed.next_page()

For more information, visit: https://docs.messari.io
"""

__version__ = "0.1.0"

# Re-export everything from client module
from messari.client import (
    AI,
    Asset,
    Diligence,
    Exchanges,
    Fundraising,
    Intel,
    Markets,
    MessariClient,
    Networks,
    News,
    PaginatedResult,
    Paginator,
    Recaps,
    Research,
    Signal,
    TokenUnlocks,
    UserManagement,
)
from messari.client.endpoints import EndpointDescriptor
from messari.client.types import (
    # Constants
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    # Errors
    APIError,
    InvalidResponseError,
    MessariError,
    PaginationError,
    PaginationFetchError,
    PaginationRangeError,
    RequestTimeoutError,
    # Events
    ClientErrorEvent,
    ClientEventType,
    ClientRequestEvent,
    ClientResponseEvent,
    RequestSummary,
    # Options and envelopes
    MessariClientOptions,
    PaginationMetadata,
    RequestOptions,
    RequestParameters,
    ResponseEnvelope,
    ResponseWithMetadata,
)

# Logging
from messari.logger import (
    Logger,
    LogLevel,
    create_filtered_logger,
    log_level_severity,
    make_console_logger,
    no_op_logger,
)
from messari.utils import build_url, encode_query, pick

__all__ = [
    # Version
    "__version__",
    # Client
    "MessariClient",
    "EndpointDescriptor",
    # Resources
    "AI",
    "Asset",
    "Diligence",
    "Exchanges",
    "Fundraising",
    "Intel",
    "Markets",
    "Networks",
    "News",
    "Recaps",
    "Research",
    "Signal",
    "TokenUnlocks",
    "UserManagement",
    # Pagination
    "PaginatedResult",
    "Paginator",
    "PaginationMetadata",
    # Options and envelopes
    "MessariClientOptions",
    "RequestOptions",
    "RequestParameters",
    "ResponseEnvelope",
    "ResponseWithMetadata",
    # Events
    "ClientEventType",
    "ClientRequestEvent",
    "ClientResponseEvent",
    "ClientErrorEvent",
    "RequestSummary",
    # Errors
    "MessariError",
    "APIError",
    "InvalidResponseError",
    "RequestTimeoutError",
    "PaginationError",
    "PaginationRangeError",
    "PaginationFetchError",
    # Constants
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    # Logging
    "LogLevel",
    "Logger",
    "log_level_severity",
    "make_console_logger",
    "create_filtered_logger",
    "no_op_logger",
    # Utilities
    "pick",
    "encode_query",
    "build_url",
]

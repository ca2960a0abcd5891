"""
Messari API client and its resources.
"""

from messari.client.client import MessariClient
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
from messari.client.types import (
    APIError,
    InvalidResponseError,
    MessariError,
    PaginationError,
    PaginationFetchError,
    PaginationRangeError,
    RequestTimeoutError,
)

__all__ = [
    "MessariClient",
    "PaginatedResult",
    "Paginator",
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
    "APIError",
    "InvalidResponseError",
    "MessariError",
    "PaginationError",
    "PaginationFetchError",
    "PaginationRangeError",
    "RequestTimeoutError",
]

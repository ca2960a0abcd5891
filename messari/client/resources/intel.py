"""
Intel resource: protocol events (hacks, upgrades, governance) and the
assets they cover.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.pagination import PaginatedResult
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Intel:
    """Intel resource."""

    def __init__(self, client: MessariClient) -> None:
        """Initialize the Intel resource.

        Args:
            client: The parent MessariClient instance
        """
        self._client = client

    async def get_all_events(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """List intel events matching the given filters.

        Filters travel in the POST body, including ``page`` and ``limit``,
        so navigation on the returned result re-posts with the new page.

        Args:
            params: Any of ``page``, ``limit``, ``primaryAssets``,
                ``secondaryAssets``, ``importance``, ``category``,
                ``status``, ``startTime``, ``endTime`` ...
            options: Optional per-call request options

        Returns:
            The first requested page of events

        Example:
            >>> events = await client.intel.get_all_events({"limit": 5, "importance": ["High"]})
            >>> for event in events.data:
            ...     print(event["title"])
        """
        return await self._client.paginate(endpoints.GET_ALL_EVENTS, params, options)

    async def get_by_id(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> Any:
        """Get one event and its history.

        Args:
            params: ``{"eventId": ...}``
            options: Optional per-call request options
        """
        return await self._client.call(endpoints.GET_EVENT_AND_HISTORY, params, options)

    async def get_all_assets(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """List assets covered by intel, filterable by ``symbol`` or ``name``."""
        return await self._client.paginate(endpoints.GET_ALL_ASSETS, params, options)

"""
News resource: the aggregated crypto news feed, its sources and the
assets it mentions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.pagination import PaginatedResult
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class News:
    """News resource. Every listing is paginated."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_news_feed_paginated(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """Get the news feed.

        Args:
            params: Optional filters. ``sourceTypes``, ``sourceIds`` and
                ``assetIds`` accept lists and are sent as repeated query
                keys; ``publishedBefore``/``publishedAfter`` are unix
                timestamps; ``limit`` and ``page`` control paging
            options: Optional per-call request options

        Returns:
            A paginated list of news documents

        Example:
            >>> feed = await client.news.get_news_feed_paginated({"assetIds": [btc_id], "limit": 10})
            >>> if feed.has_next_page:
            ...     older = await feed.next_page()
        """
        return await self._client.paginate(endpoints.GET_NEWS_FEED, params, options)

    async def get_news_feed_assets_paginated(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """Get assets mentioned in the news, filterable by ``nameOrSymbol``."""
        return await self._client.paginate(endpoints.GET_NEWS_FEED_ASSETS, params, options)

    async def get_news_sources_paginated(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """Get news sources, filterable by ``sourceName``."""
        return await self._client.paginate(endpoints.GET_NEWS_SOURCES, params, options)

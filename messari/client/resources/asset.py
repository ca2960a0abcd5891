"""
Asset resource: paginated asset list (metrics v1) plus metrics v2 listings,
details and time series.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.pagination import PaginatedResult
from messari.client.types import RequestOptions, ResponseWithMetadata

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Asset:
    """Asset metrics resource."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_asset_list(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """List assets page by page.

        Args:
            params: Optional ``symbol`` (comma-separated), ``category``,
                ``sector``, ``tags`` filters plus ``page``/``limit``
            options: Optional per-call request options

        Example:
            >>> assets = await client.asset.get_asset_list({"category": "Networks", "limit": 20})
            >>> print(assets.total_pages, [a["symbol"] for a in assets.data])
        """
        return await self._client.paginate(endpoints.GET_ASSET_LIST, params, options)

    async def get_assets_v2(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """List assets, optionally filtered by category, sector, tags or dataset coverage."""
        return await self._client.call(endpoints.GET_ASSETS_V2, params, options)

    async def get_asset_details(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> Any:
        """Get details for assets selected by comma-separated ``ids`` or ``slugs``."""
        return await self._client.call(endpoints.GET_ASSET_DETAILS, params, options)

    async def get_assets_timeseries_catalog(self, options: RequestOptions | None = None) -> Any:
        """List the datasets and granularities available as time series."""
        return await self._client.call(endpoints.GET_ASSETS_TIMESERIES_CATALOG, None, options)

    async def get_asset_timeseries(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        """Get a dataset time series for one asset.

        Args:
            params: ``entityIdentifier`` and ``datasetSlug`` path parameters,
                optional ``start``/``end``
            options: Optional per-call request options
        """
        return await self._client.call_with_metadata(endpoints.GET_ASSET_TIMESERIES, params, options)

    async def get_asset_timeseries_with_granularity(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        """Same as :meth:`get_asset_timeseries` with an explicit ``granularity`` (1m, 1h, 1d)."""
        return await self._client.call_with_metadata(
            endpoints.GET_ASSET_TIMESERIES_WITH_GRANULARITY,
            params,
            options,
        )

    async def get_assets_ath(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """All-time-high data for the selected assets."""
        return await self._client.call(endpoints.GET_ASSETS_ATH, params, options)

    async def get_assets_roi(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Return-on-investment data for the selected assets."""
        return await self._client.call(endpoints.GET_ASSETS_ROI, params, options)

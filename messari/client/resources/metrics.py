"""
Metrics v1 resources: exchanges, markets and networks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.pagination import PaginatedResult
from messari.client.types import RequestOptions, ResponseWithMetadata

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Exchanges:
    """Centralized and decentralized exchange metrics."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_exchanges(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """List exchanges, filterable by ``type`` and ``typeRankCutoff``."""
        return await self._client.paginate(endpoints.GET_EXCHANGES, params, options)

    async def get_exchange(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Get one exchange by ``exchangeIdentifier`` (id or slug)."""
        return await self._client.call(endpoints.GET_EXCHANGE, params, options)

    async def get_exchange_metrics(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_EXCHANGE_METRICS, None, options)

    async def get_exchange_timeseries(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_EXCHANGE_TIMESERIES, params, options)


class Markets:
    """Trading pair (market) metrics and per-asset market data."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_asset_price(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Latest market data (price, volume, 24h change) for ``assetId``.

        Example:
            >>> md = await client.markets.get_asset_price({"assetId": btc_id})
            >>> print(md["priceUsd"])
        """
        return await self._client.call(endpoints.GET_ASSET_MARKETDATA, params, options)

    async def get_asset_roi(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_ASSET_ROI, params, options)

    async def get_asset_ath(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_ASSET_ATH, params, options)

    async def get_all_assets_roi(self, options: RequestOptions | None = None) -> Any:
        """ROI over standard periods for every asset with market data."""
        return await self._client.call(endpoints.GET_ALL_ASSETS_ROI, None, options)

    async def get_all_assets_ath(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_ALL_ASSETS_ATH, None, options)

    async def get_markets(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        """List markets filtered by exchange, base/quote asset or 24h volume."""
        return await self._client.call_with_metadata(endpoints.GET_MARKETS, params, options)

    async def get_market(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_MARKET, params, options)

    async def get_market_metrics(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_MARKET_METRICS, None, options)

    async def get_market_timeseries(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_MARKET_TIMESERIES, params, options)


class Networks:
    """Blockchain network metrics."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_networks(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        return await self._client.paginate(endpoints.GET_NETWORKS, params, options)

    async def get_network(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Get one network by ``networkIdentifier`` (id or slug)."""
        return await self._client.call(endpoints.GET_NETWORK, params, options)

    async def get_network_metrics(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_NETWORK_METRICS, None, options)

    async def get_network_timeseries(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_NETWORK_TIMESERIES, params, options)

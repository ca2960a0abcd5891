"""
Signal resource: social mindshare for assets and influencers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Signal:
    """Signal resource."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_assets(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Assets ranked by Twitter mindshare, with 7d/30d score changes."""
        return await self._client.call(endpoints.GET_SIGNAL_ASSETS, params, options)

    async def get_influencers(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Crypto Twitter influencers with follower counts and mindshare scores."""
        return await self._client.call(endpoints.GET_SIGNAL_INFLUENCERS, params, options)

"""
Token unlocks resource: supply unlocks, vesting schedules and allocations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class TokenUnlocks:
    """Token unlocks resource.

    Per-asset methods take the asset in ``params["assetId"]``; time windows
    use ``startTime``/``endTime`` (ISO 8601).
    """

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_supported_assets(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._client.call(endpoints.GET_TOKEN_UNLOCK_SUPPORTED_ASSETS, params, options)

    async def get_allocations(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Allocation breakdown for the comma-separated ``assetIDs``."""
        return await self._client.call(endpoints.GET_TOKEN_UNLOCK_ALLOCATIONS, params, options)

    async def get_vesting_schedule(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_TOKEN_UNLOCK_VESTING_SCHEDULE, params, options)

    async def get_unlocks(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Unlocked supply over time, bucketed by ``interval`` (e.g. "1d")."""
        return await self._client.call(endpoints.GET_TOKEN_UNLOCKS, params, options)

    async def get_events(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_TOKEN_UNLOCK_EVENTS, params, options)

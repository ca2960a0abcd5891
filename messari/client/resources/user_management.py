"""
User management resource: API credits, permissions and watchlists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class UserManagement:
    """User management resource."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_team_allowance(self, options: RequestOptions | None = None) -> Any:
        """Remaining API credits for the team owning the API key."""
        return await self._client.call(endpoints.GET_TEAM_ALLOWANCE, None, options)

    async def get_permissions(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_PERMISSIONS, None, options)

    async def list_watchlists(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.LIST_WATCHLISTS, None, options)

    async def get_watchlist(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_WATCHLIST, params, options)

    async def create_watchlist(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Create a watchlist from ``title`` and ``assetIds``."""
        return await self._client.call(endpoints.CREATE_WATCHLIST, params, options)

    async def update_watchlist(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Replace the ``title`` and/or ``assetIds`` of watchlist ``id``."""
        return await self._client.call(endpoints.UPDATE_WATCHLIST, params, options)

    async def modify_watchlist_assets(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Add or remove assets: ``action`` is "add" or "remove", applied to ``assetIds``."""
        return await self._client.call(endpoints.MODIFY_WATCHLIST_ASSETS, params, options)

    async def delete_watchlist(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.DELETE_WATCHLIST, params, options)

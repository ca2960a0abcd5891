"""
Recaps resource: AI-generated project and exchange digests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Recaps:
    """Recaps resource."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_project_recap(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Latest recaps for a project over 1D, 7D, 30D and 90D.

        Args:
            params: ``{"project_id": ...}``
            options: Optional per-call request options
        """
        return await self._client.call(endpoints.GET_PROJECT_RECAP, params, options)

    async def get_exchange_recap(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Detailed recap for one exchange: performance, volume and summarized news.

        Args:
            params: ``{"exchange_id": ...}``
            options: Optional per-call request options
        """
        return await self._client.call(endpoints.GET_EXCHANGE_RECAP, params, options)

    async def get_exchange_rankings_recap(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Performance summary and volume ranking across all exchanges, optionally for a ``period``."""
        return await self._client.call(endpoints.GET_EXCHANGE_RANKINGS_RECAP, params, options)

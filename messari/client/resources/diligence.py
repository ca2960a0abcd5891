"""
Diligence resource: protocol due-diligence reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Diligence:
    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_diligence_preview(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """List report previews, filterable by ``sector`` and publication state."""
        return await self._client.call(endpoints.GET_DILIGENCE_PREVIEWS, params, options)

    async def get_diligence_report(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        """Get the full report for ``assetId``."""
        return await self._client.call(endpoints.GET_DILIGENCE_REPORT, params, options)

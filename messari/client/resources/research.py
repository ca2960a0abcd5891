"""
Research resource: Messari research reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.pagination import PaginatedResult
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Research:
    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_research_reports(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> PaginatedResult:
        """List reports, filterable by ``assetId``, ``tags`` and ``contentType``."""
        return await self._client.paginate(endpoints.GET_RESEARCH_REPORTS, params, options)

    async def get_research_report_by_id(self, params: Mapping[str, Any], options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_RESEARCH_REPORT_BY_ID, params, options)

    async def get_research_report_tags(self, options: RequestOptions | None = None) -> Any:
        return await self._client.call(endpoints.GET_RESEARCH_REPORT_TAGS, None, options)

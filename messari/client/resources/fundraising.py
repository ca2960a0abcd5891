"""
Fundraising resource: funding rounds, investors, M&A deals, organizations
and projects.

Every method returns a :class:`~messari.client.types.ResponseWithMetadata`
so callers can read the server's paging metadata alongside the rows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions, ResponseWithMetadata

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class Fundraising:
    """Fundraising resource."""

    def __init__(self, client: MessariClient) -> None:
        self._client = client

    async def get_funding_rounds(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        """List funding rounds.

        Args:
            params: Filters such as ``fundedEntityId``, ``investorId``,
                ``stage``, ``raisedAmountMin``/``raisedAmountMax``,
                ``announcedAfter``/``announcedBefore``, plus ``page``/``limit``
            options: Optional per-call request options

        Example:
            >>> rounds = await client.fundraising.get_funding_rounds({"stage": "Seed", "limit": 25})
            >>> print(len(rounds.data), rounds.metadata)
        """
        return await self._client.call_with_metadata(endpoints.GET_FUNDING_ROUNDS, params, options)

    async def get_funding_rounds_investors(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        """List investors of the funding rounds matching the same filters as :meth:`get_funding_rounds`."""
        return await self._client.call_with_metadata(endpoints.GET_FUNDING_ROUNDS_INVESTORS, params, options)

    async def get_acquisition_deals(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_ACQUISITION_DEALS, params, options)

    async def get_organizations(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_ORGANIZATIONS, params, options)

    async def get_projects(
        self,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseWithMetadata:
        return await self._client.call_with_metadata(endpoints.GET_PROJECTS, params, options)

"""
AI resource: Messari Copilot chat completions and entity extraction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from messari.client import endpoints
from messari.client.types import RequestOptions

if TYPE_CHECKING:
    from messari.client.client import MessariClient


class AI:
    """AI resource for chat completions and entity extraction."""

    def __init__(self, client: MessariClient) -> None:
        """Initialize the AI resource.

        Args:
            client: The parent MessariClient instance
        """
        self._client = client

    async def create_chat_completion(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> Any:
        """Ask Messari Copilot a question.

        Copilot answers from Messari's datasets: news, exchanges, onchain
        data, token unlocks, market data, fundraising, protocol research and
        social metrics.

        Args:
            params: Request body. ``messages`` is a list of
                ``{"role": ..., "content": ...}`` dicts; ``verbosity``,
                ``response_format`` and ``stream`` are optional
            options: Optional per-call request options

        Returns:
            The completion payload, whose ``messages`` hold the answer

        Raises:
            APIError: If the API rejects the request
            RequestTimeoutError: If the request exceeds its deadline

        Example:
            >>> completion = await client.ai.create_chat_completion({
            ...     "messages": [{"role": "user", "content": "When is Arbitrum's next unlock?"}],
            ... })
            >>> print(completion["messages"][0]["content"])
        """
        return await self._client.call(endpoints.CREATE_CHAT_COMPLETION, params, options)

    async def extract_entities(
        self,
        params: Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> Any:
        """Extract crypto entities (assets, people, organizations ...) from text.

        Args:
            params: ``content`` plus optional ``entityTypes`` and
                ``allSimilarEntities``
            options: Optional per-call request options
        """
        return await self._client.call(endpoints.EXTRACT_ENTITIES, params, options)

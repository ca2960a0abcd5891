"""
Contract tests for the API resources.

Each test checks the method, path, query string and body a resource method
puts on the wire, and how the response is handed back.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from messari.client.client import MessariClient
from messari.client.pagination import PaginatedResult
from messari.client.types import MessariError, ResponseWithMetadata

# ============================================================================
# Helpers
# ============================================================================


class _Api:
    """Answers every request with ``response`` and records what was sent."""

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response = response if response is not None else {"data": {"ok": True}}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.response)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def api() -> _Api:
    return _Api()


@pytest.fixture
def client(api: _Api) -> MessariClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api))
    return MessariClient(api_key="test-api-key", http_client=http_client, disable_logging=True)


# ============================================================================
# Tests
# ============================================================================


class TestAI:
    async def test_chat_completion_posts_filtered_body(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": {"messages": [{"role": "assistant", "content": "Hi"}]}}

        result = await client.ai.create_chat_completion(
            {"messages": [{"role": "user", "content": "Hello"}], "verbosity": "succinct", "junk": 1}
        )

        assert result == {"messages": [{"role": "assistant", "content": "Hi"}]}
        assert api.last.method == "POST"
        assert api.last.url.path == "/ai/v1/chat/completions"
        assert api.last_body == {"messages": [{"role": "user", "content": "Hello"}], "verbosity": "succinct"}

    async def test_extract_entities(self, client: MessariClient, api: _Api) -> None:
        await client.ai.extract_entities({"content": "ETH rallied", "entityTypes": ["asset"]})

        assert api.last.url.path == "/ai/v1/classification/extraction"
        assert api.last_body == {"content": "ETH rallied", "entityTypes": ["asset"]}


class TestAsset:
    async def test_timeseries_substitutes_path_and_returns_metadata(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": {"points": []}, "metadata": {"granularity": "1d"}}

        result = await client.asset.get_asset_timeseries_with_granularity(
            {
                "entityIdentifier": "bitcoin",
                "datasetSlug": "price",
                "granularity": "1d",
                "start": "2024-01-01",
            }
        )

        assert isinstance(result, ResponseWithMetadata)
        assert result.metadata == {"granularity": "1d"}
        assert api.last.url.path == "/metrics/v2/assets/bitcoin/metrics/price/time-series/1d"
        assert dict(api.last.url.params) == {"start": "2024-01-01"}

    async def test_missing_path_parameter_fails_before_request(self, client: MessariClient, api: _Api) -> None:
        with pytest.raises(MessariError):
            await client.asset.get_asset_timeseries({"entityIdentifier": "bitcoin"})

        assert api.requests == []

    async def test_asset_list_is_paginated(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": [{"symbol": "BTC"}], "metadata": {"page": 2, "limit": 5, "total": 12}}

        result = await client.asset.get_asset_list(
            {"symbol": "BTC,ETH", "category": "Networks", "page": 2, "limit": 5, "junk": 1}
        )

        assert isinstance(result, PaginatedResult)
        assert result.data == [{"symbol": "BTC"}]
        assert result.total_pages == 3
        assert api.last.url.path == "/metrics/v1/assets"
        assert dict(api.last.url.params) == {"symbol": "BTC,ETH", "category": "Networks", "page": "2", "limit": "5"}

        await result.next_page()

        assert dict(api.last.url.params) == {"symbol": "BTC,ETH", "category": "Networks", "page": "3", "limit": "5"}


class TestMarkets:
    @pytest.mark.parametrize(
        ("method", "suffix"),
        [
            ("get_asset_price", "marketdata"),
            ("get_asset_roi", "roi"),
            ("get_asset_ath", "ath"),
        ],
    )
    async def test_per_asset_market_data(self, client: MessariClient, api: _Api, method: str, suffix: str) -> None:
        api.response = {"data": {"priceUsd": 1.0}}

        result = await getattr(client.markets, method)({"assetId": "abc", "junk": 1})

        assert result == {"priceUsd": 1.0}
        assert api.last.url.path == f"/metrics/v1/assets/abc/{suffix}"
        assert dict(api.last.url.params) == {}

    async def test_all_assets_roi_and_ath(self, client: MessariClient, api: _Api) -> None:
        await client.markets.get_all_assets_roi()
        assert api.last.url.path == "/metrics/v1/assets/roi"

        await client.markets.get_all_assets_ath()
        assert api.last.url.path == "/metrics/v1/assets/ath"

    async def test_asset_price_requires_asset_id(self, client: MessariClient, api: _Api) -> None:
        with pytest.raises(MessariError):
            await client.markets.get_asset_price({})

        assert api.requests == []


class TestSignal:
    async def test_assets(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": [{"name": "Bitcoin"}]}

        result = await client.signal.get_assets()

        assert result == [{"name": "Bitcoin"}]
        assert api.last.method == "GET"
        assert api.last.url.path == "/signal/v1/assets"

    async def test_influencers_forward_limit(self, client: MessariClient, api: _Api) -> None:
        await client.signal.get_influencers({"limit": 5, "junk": 1})

        assert api.last.url.path == "/signal/v1/influencers"
        assert dict(api.last.url.params) == {"limit": "5"}


class TestNews:
    async def test_list_filters_become_repeated_keys(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": [], "metadata": {"page": 1, "limit": 10, "total": 0}}

        await client.news.get_news_feed_paginated({"assetIds": ["btc", "eth"], "sourceTypes": ["Blog"]})

        assert api.last.url.path == "/news/v1/news/feed"
        assert api.last.url.params.get_list("assetIds") == ["btc", "eth"]
        assert api.last.url.params.get_list("sourceTypes") == ["Blog"]


class TestFundraising:
    async def test_funding_rounds_return_metadata(self, client: MessariClient, api: _Api) -> None:
        api.response = {"data": [{"id": "r1"}], "metadata": {"page": 1, "limit": 25, "total": 1}}

        result = await client.fundraising.get_funding_rounds({"stage": "Seed", "limit": 25})

        assert result.data == [{"id": "r1"}]
        assert result.metadata["total"] == 1
        assert api.last.url.path == "/funding/v1/rounds"
        assert dict(api.last.url.params) == {"stage": "Seed", "limit": "25"}


class TestUserManagement:
    async def test_create_watchlist(self, client: MessariClient, api: _Api) -> None:
        await client.user_management.create_watchlist({"title": "L1s", "assetIds": ["a", "b"]})

        assert api.last.method == "POST"
        assert api.last.url.path == "/user-management/v1/watchlists"
        assert api.last_body == {"title": "L1s", "assetIds": ["a", "b"]}

    async def test_modify_watchlist_assets(self, client: MessariClient, api: _Api) -> None:
        await client.user_management.modify_watchlist_assets({"id": "w1", "action": "add", "assetIds": ["c"]})

        assert api.last.method == "PATCH"
        assert api.last.url.path == "/user-management/v1/watchlists/w1/assets"
        assert api.last_body == {"action": "add", "assetIds": ["c"]}

    async def test_delete_watchlist_sends_no_body(self, client: MessariClient, api: _Api) -> None:
        await client.user_management.delete_watchlist({"id": "w1"})

        assert api.last.method == "DELETE"
        assert api.last.url.path == "/user-management/v1/watchlists/w1"
        assert api.last_body is None


class TestMiscResources:
    async def test_token_unlocks(self, client: MessariClient, api: _Api) -> None:
        await client.token_unlocks.get_unlocks({"assetId": "arb", "interval": "1d"})

        assert api.last.url.path == "/token-unlocks/v1/assets/arb/unlocks"
        assert dict(api.last.url.params) == {"interval": "1d"}

    async def test_recaps(self, client: MessariClient, api: _Api) -> None:
        await client.recaps.get_exchange_rankings_recap({"period": "7d"})

        assert api.last.url.path == "/ai-digest/api/v1/exchange-rankings-recap"
        assert dict(api.last.url.params) == {"period": "7d"}

    async def test_diligence_report(self, client: MessariClient, api: _Api) -> None:
        await client.diligence.get_diligence_report({"assetId": "aave"})

        assert api.last.url.path == "/diligence/v1/report/asset/aave"

    async def test_research_report_tags(self, client: MessariClient, api: _Api) -> None:
        assert await client.research.get_research_report_tags() == {"ok": True}
        assert api.last.url.path == "/research/v1/reports/tags"

    async def test_exchange_and_network_lookups(self, client: MessariClient, api: _Api) -> None:
        await client.exchanges.get_exchange({"exchangeIdentifier": "binance"})
        assert api.last.url.path == "/metrics/v1/exchanges/binance"

        await client.networks.get_network({"networkIdentifier": "ethereum"})
        assert api.last.url.path == "/metrics/v1/networks/ethereum"

        await client.markets.get_market({"marketIdentifier": "binance-btc-usdt"})
        assert api.last.url.path == "/metrics/v1/markets/binance-btc-usdt"

"""
Tests for page-number pagination.

``Paginator`` is exercised directly with a stub page fetcher, and end to end
through ``MessariClient`` with a mocked API that serves seven items in pages
of three.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from messari.client.client import MessariClient
from messari.client.pagination import (
    PaginatedResult,
    Paginator,
    normalize_metadata,
    normalize_page_metadata,
)
from messari.client.types import (
    PaginationFetchError,
    PaginationMetadata,
    PaginationRangeError,
    ResponseWithMetadata,
)
from messari.logger import LogLevel

ITEMS = [1, 2, 3, 4, 5, 6, 7]
PAGE_SIZE = 3

# ============================================================================
# Helpers
# ============================================================================


def _page_response(page: int, limit: int = PAGE_SIZE, items: list[Any] = ITEMS) -> dict[str, Any]:
    start = (page - 1) * limit
    return {
        "data": items[start : start + limit],
        "metadata": {
            "page": page,
            "limit": limit,
            "total": len(items),
            "hasMore": start + limit < len(items),
        },
    }


class _FeedApi:
    """Mock news feed API counting requests per page."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = int(request.url.params.get("page", "1"))
        limit = int(request.url.params.get("limit", str(PAGE_SIZE)))
        return httpx.Response(200, json=_page_response(page, limit))


def _make_client(handler: Any) -> MessariClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MessariClient(api_key="test-api-key", http_client=http_client, disable_logging=True)


def _stub_fetch(pages: dict[int, list[Any]], limit: int, total: int, failing: set[int] = frozenset()) -> AsyncMock:
    """Page fetcher serving ``pages``; pages in ``failing`` raise."""

    def fetch(params: Any, options: Any) -> ResponseWithMetadata:
        page = params["page"]
        if page in failing:
            raise RuntimeError(f"page {page} unavailable")
        return ResponseWithMetadata(data=pages[page], metadata={"page": page, "limit": limit, "total": total})

    return AsyncMock(side_effect=fetch)


def _first(paginator: Paginator, data: Any, metadata: Any, params: dict[str, Any] | None = None) -> PaginatedResult:
    return paginator.wrap(params or {}, ResponseWithMetadata(data=data, metadata=metadata))


# ============================================================================
# Tests: metadata normalization
# ============================================================================


class TestNormalizeMetadata:
    def test_missing_metadata_uses_defaults(self) -> None:
        meta = normalize_metadata(None)

        assert meta == PaginationMetadata(page=1, limit=10, total=0, total_pages=0, has_more=False)

    def test_computes_total_pages(self) -> None:
        meta = normalize_metadata({"page": 1, "limit": 3, "total": 7, "hasMore": True})

        assert meta.total_pages == 3
        assert meta.has_more is True

    def test_total_rows_is_used_when_total_is_absent(self) -> None:
        meta = normalize_metadata({"page": 2, "limit": 50, "totalRows": 120})

        assert meta.total == 120
        assert meta.total_rows == 120
        assert meta.total_pages == 3

    def test_navigated_page_falls_back_to_previous_metadata(self) -> None:
        previous = normalize_metadata({"page": 1, "limit": 3, "total": 7, "hasMore": True})

        meta = normalize_page_metadata(None, 2, previous)

        assert meta.page == 2
        assert meta.limit == 3
        assert meta.total_pages == 3
        assert meta.has_more is False

    def test_navigated_page_prefers_fresh_totals(self) -> None:
        previous = normalize_metadata({"page": 1, "limit": 3, "total": 7})

        meta = normalize_page_metadata({"total": 10}, 2, previous)

        assert meta.page == 2
        assert meta.total == 10
        assert meta.total_pages == 4


# ============================================================================
# Tests: PaginatedResult
# ============================================================================


class TestPaginatedResult:
    def test_navigation_flags(self) -> None:
        result = PaginatedResult(data=[], metadata=PaginationMetadata(page=2, limit=3, total=7, total_pages=3))

        assert result.has_next_page
        assert result.has_previous_page

    def test_has_more_alone_means_next_page(self) -> None:
        result = PaginatedResult(data=[], metadata=PaginationMetadata(page=1, has_more=True))

        assert result.has_next_page
        assert not result.has_previous_page

    def test_is_immutable(self) -> None:
        result = PaginatedResult(data=[], metadata=PaginationMetadata())

        with pytest.raises(AttributeError):
            result.data = [1]  # type: ignore[misc]

    async def test_unbound_result_cannot_navigate(self) -> None:
        result = PaginatedResult(data=[], metadata=PaginationMetadata(has_more=True))

        with pytest.raises(RuntimeError):
            await result.next_page()


# ============================================================================
# Tests: Paginator with a stub fetcher
# ============================================================================


class TestPaginator:
    async def test_get_all_pages_concatenates_in_page_order(self) -> None:
        fetch = _stub_fetch({1: ["a", "b"], 2: ["c", "d"], 3: ["e"]}, limit=2, total=5)
        paginator = Paginator(fetch)
        first = _first(paginator, ["a", "b"], {"page": 1, "limit": 2, "total": 5})

        assert await first.get_all_pages() == ["a", "b", "c", "d", "e"]
        assert fetch.await_count == 2

    async def test_get_all_pages_skips_failed_page(self) -> None:
        logger = MagicMock()
        fetch = _stub_fetch({1: ["a", "b"], 2: ["c", "d"], 3: ["e"]}, limit=2, total=5, failing={2})
        paginator = Paginator(fetch, logger=logger)
        first = _first(paginator, ["a", "b"], {"page": 1, "limit": 2, "total": 5})

        assert await first.get_all_pages() == ["a", "b", "e"]
        level, message, extra = logger.call_args.args
        assert level == LogLevel.WARN
        assert message == "skipping page in get_all_pages"
        assert extra["page"] == 2
        assert isinstance(extra["error"], PaginationFetchError)

    async def test_get_all_pages_strict_raises(self) -> None:
        fetch = _stub_fetch({1: ["a", "b"], 2: ["c", "d"], 3: ["e"]}, limit=2, total=5, failing={3})
        first = _first(Paginator(fetch), ["a", "b"], {"page": 1, "limit": 2, "total": 5})

        with pytest.raises(PaginationFetchError, match="Error fetching page 3"):
            await first.get_all_pages(strict=True)

    async def test_get_all_pages_with_unknown_total_returns_current_data(self) -> None:
        fetch = _stub_fetch({}, limit=10, total=0)
        first = _first(Paginator(fetch), ["only"], None)

        assert await first.get_all_pages() == ["only"]
        fetch.assert_not_awaited()

    async def test_get_all_pages_wraps_scalar_data(self) -> None:
        first = _first(Paginator(_stub_fetch({}, limit=10, total=0)), {"id": 1}, None)

        assert await first.get_all_pages() == [{"id": 1}]

    async def test_navigation_merges_page_into_caller_params(self) -> None:
        fetch = _stub_fetch({1: [1], 2: [2]}, limit=1, total=2)
        options = MagicMock()
        paginator = Paginator(fetch, options)
        first = _first(paginator, [1], {"page": 1, "limit": 1, "total": 2}, params={"limit": 1, "sort": "desc"})

        second = await first.next_page()

        fetch.assert_awaited_once_with({"limit": 1, "sort": "desc", "page": 2}, options)
        assert second.params == {"limit": 1, "sort": "desc", "page": 2}
        assert first.params == {"limit": 1, "sort": "desc"}

    async def test_fetch_failure_is_wrapped_with_cause(self) -> None:
        fetch = _stub_fetch({1: [1]}, limit=1, total=2, failing={2})
        first = _first(Paginator(fetch), [1], {"page": 1, "limit": 1, "total": 2})

        with pytest.raises(PaginationFetchError) as exc_info:
            await first.next_page()

        assert str(exc_info.value) == "Error fetching next page: page 2 unavailable"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.page == 2

    async def test_previous_page_on_first_page_makes_no_request(self) -> None:
        fetch = _stub_fetch({1: [1]}, limit=1, total=2)
        first = _first(Paginator(fetch), [1], {"page": 1, "limit": 1, "total": 2})

        same = await first.previous_page()

        fetch.assert_not_awaited()
        assert same.page == 1
        assert same.data == [1]


# ============================================================================
# Tests: end to end through the client
# ============================================================================


class TestClientPagination:
    async def test_first_page_reports_navigation_state(self) -> None:
        api = _FeedApi()
        client = _make_client(api)

        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})

        assert first.data == [1, 2, 3]
        assert first.page == 1
        assert first.total_pages == 3
        assert first.has_next_page
        assert not first.has_previous_page

    async def test_next_page_returns_new_result(self) -> None:
        client = _make_client(_FeedApi())
        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})

        second = await first.next_page()

        assert second.page == 2
        assert second.data == [4, 5, 6]
        assert first.page == 1
        assert first.data == [1, 2, 3]

    async def test_next_then_previous_returns_to_same_page(self) -> None:
        client = _make_client(_FeedApi())
        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})

        back = await (await first.next_page()).previous_page()

        assert back.page == first.page
        assert back.data == first.data

    async def test_go_to_page_out_of_range_makes_no_request(self) -> None:
        api = _FeedApi()
        client = _make_client(api)
        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})
        calls_before = len(api.requests)

        with pytest.raises(PaginationRangeError, match="Page 0 is out of range. Valid range: 1-3"):
            await first.go_to_page(0)
        with pytest.raises(PaginationRangeError, match="Page 4 is out of range"):
            await first.go_to_page(first.total_pages + 1)

        assert len(api.requests) == calls_before

    async def test_next_page_at_end_makes_no_request(self) -> None:
        api = _FeedApi()
        client = _make_client(api)
        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})
        last = await first.go_to_page(3)
        calls_before = len(api.requests)

        same = await last.next_page()

        assert not last.has_next_page
        assert len(api.requests) == calls_before
        assert same.page == 3
        assert same.data == [7]

    async def test_get_all_pages_fetches_remaining_pages(self) -> None:
        api = _FeedApi()
        client = _make_client(api)
        first = await client.news.get_news_feed_paginated({"limit": PAGE_SIZE})

        assert await first.get_all_pages() == ITEMS
        assert sorted(int(r.url.params["page"]) for r in api.requests[1:]) == [2, 3]

    async def test_body_pagination_reposts_with_new_page(self) -> None:
        bodies: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json=_page_response(body.get("page", 1), body["limit"]))

        client = _make_client(handler)
        first = await client.intel.get_all_events({"limit": PAGE_SIZE, "importance": ["High"]})

        second = await first.next_page()

        assert second.data == [4, 5, 6]
        assert bodies == [
            {"limit": PAGE_SIZE, "importance": ["High"]},
            {"limit": PAGE_SIZE, "importance": ["High"], "page": 2},
        ]

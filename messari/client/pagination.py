"""
Page-number pagination over list endpoints.

A :class:`PaginatedResult` is an immutable snapshot of one page. Navigation
(``next_page``, ``previous_page``, ``go_to_page``, ``get_all_pages``) is
delegated to a stateless :class:`Paginator` that knows how to fetch a page,
so every navigation step returns a brand-new result and never mutates the
one it was called on.

Example:
    >>> feed = await client.news.get_news_feed_paginated({"limit": 20})
    >>> while feed.has_next_page:
    ...     feed = await feed.next_page()
    >>> everything = await feed.get_all_pages()
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Mapping, Optional

from messari.client.types import (
    PaginationFetchError,
    PaginationMetadata,
    PaginationRangeError,
    RequestOptions,
    ResponseWithMetadata,
)
from messari.logger import Logger, LogLevel, no_op_logger

FetchPage = Callable[[Mapping[str, Any], Optional[RequestOptions]], Awaitable[ResponseWithMetadata]]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def _raw(metadata: Any) -> Mapping[str, Any] | None:
    if isinstance(metadata, PaginationMetadata):
        return metadata.model_dump(by_alias=True)
    if isinstance(metadata, Mapping):
        return metadata
    return None


def normalize_metadata(raw: Any) -> PaginationMetadata:
    """Build metadata for the first page from whatever the server returned.

    Missing fields default to ``page=1``, ``limit=10``, ``total=0`` and
    ``has_more=False``. ``total_pages`` is always recomputed from
    ``total`` and ``limit``.
    """
    meta = _raw(raw)
    if not meta:
        return PaginationMetadata()

    page = meta.get("page") or DEFAULT_PAGE
    limit = meta.get("limit") or DEFAULT_LIMIT
    total = meta.get("total") or meta.get("totalRows") or 0
    return PaginationMetadata(
        page=page,
        limit=limit,
        total=total,
        total_rows=total,
        total_pages=_total_pages(total, limit),
        has_more=bool(meta.get("hasMore")),
    )


def normalize_page_metadata(raw: Any, requested_page: int, previous: PaginationMetadata) -> PaginationMetadata:
    """Build metadata for a page reached by navigation.

    Fields the server left out fall back to the requested page number and
    to the previous page's metadata. Fresher totals always win.
    """
    meta = _raw(raw)
    if not meta:
        return PaginationMetadata(
            page=requested_page,
            limit=previous.limit,
            total=previous.total,
            total_rows=previous.total_rows,
            total_pages=previous.total_pages,
            has_more=False,
        )

    limit = meta.get("limit") or previous.limit
    total = meta.get("total") or meta.get("totalRows") or previous.total
    return PaginationMetadata(
        page=meta.get("page") or requested_page,
        limit=limit,
        total=total,
        total_rows=total,
        total_pages=_total_pages(total, limit),
        has_more=bool(meta.get("hasMore")),
    )


def _as_list(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, tuple):
        return list(data)
    return [data]


@dataclass(frozen=True)
class PaginatedResult:
    """One page of a list endpoint.

    Attributes:
        data: The page payload
        metadata: Normalized pagination metadata
        error: Envelope-level error reported by the server, if any
        params: The parameters used to fetch this page
    """

    data: Any
    metadata: PaginationMetadata
    params: Mapping[str, Any] = field(default_factory=dict)
    error: str | None = None
    paginator: Paginator | None = field(default=None, repr=False, compare=False)

    @property
    def page(self) -> int:
        return self.metadata.page

    @property
    def total_pages(self) -> int:
        return self.metadata.total_pages

    @property
    def has_next_page(self) -> bool:
        return self.metadata.has_more or self.metadata.page < self.metadata.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.metadata.page > 1

    def _require_paginator(self) -> Paginator:
        if self.paginator is None:
            raise RuntimeError("This result is not bound to a paginator")
        return self.paginator

    async def next_page(self) -> PaginatedResult:
        return await self._require_paginator().next_page(self)

    async def previous_page(self) -> PaginatedResult:
        return await self._require_paginator().previous_page(self)

    async def go_to_page(self, page: int) -> PaginatedResult:
        return await self._require_paginator().go_to_page(self, page)

    async def get_all_pages(self, strict: bool = False) -> list[Any]:
        return await self._require_paginator().get_all_pages(self, strict=strict)


class Paginator:
    """Stateless page navigator shared by every result of one listing.

    Args:
        fetch_page: Performs one page request for the given parameters
        options: Request options reused for every page
        logger: Receives a WARN record for each page skipped by get_all_pages
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        options: RequestOptions | None = None,
        logger: Logger = no_op_logger,
    ) -> None:
        self._fetch_page = fetch_page
        self._options = options
        self._logger = logger

    def wrap(self, params: Mapping[str, Any] | None, response: ResponseWithMetadata) -> PaginatedResult:
        """Wrap the first fetched page."""
        return PaginatedResult(
            data=response.data,
            metadata=normalize_metadata(response.metadata),
            params=dict(params or {}),
            error=response.error,
            paginator=self,
        )

    async def _fetch(self, current: PaginatedResult, page: int, action: str) -> PaginatedResult:
        params = {**current.params, "page": page}
        try:
            response = await self._fetch_page(params, self._options)
        except Exception as error:
            raise PaginationFetchError(action, page, error) from error
        return PaginatedResult(
            data=response.data,
            metadata=normalize_page_metadata(response.metadata, page, current.metadata),
            params=params,
            error=response.error,
            paginator=self,
        )

    async def next_page(self, current: PaginatedResult) -> PaginatedResult:
        """Fetch the page after ``current``; past the end, return the same page."""
        if not current.has_next_page:
            return replace(current)
        return await self._fetch(current, current.page + 1, "next page")

    async def previous_page(self, current: PaginatedResult) -> PaginatedResult:
        """Fetch the page before ``current``; on page 1, return the same page."""
        if not current.has_previous_page:
            return replace(current)
        return await self._fetch(current, current.page - 1, "previous page")

    async def go_to_page(self, current: PaginatedResult, page: int) -> PaginatedResult:
        """Fetch an arbitrary page.

        Raises:
            PaginationRangeError: If ``page`` is below 1 or above the known
                page count. No request is made.
            PaginationFetchError: If the request fails
        """
        total_pages = current.total_pages
        if page < 1 or (total_pages and page > total_pages):
            raise PaginationRangeError(page, total_pages)
        return await self._fetch(current, page, f"page {page}")

    async def get_all_pages(self, current: PaginatedResult, strict: bool = False) -> list[Any]:
        """Fetch every page concurrently and concatenate their data in page order.

        When the page count is unknown only the current page's data is
        returned. The current page is not fetched again.

        This is a best-effort aggregation: a page that fails to load is
        logged and contributes nothing, so the result can be incomplete.
        Pass ``strict=True`` to raise the first failure instead.
        """
        total_pages = current.total_pages
        if not total_pages:
            return list(_as_list(current.data))

        pages = [page for page in range(1, total_pages + 1) if page != current.page]
        results = await asyncio.gather(
            *(self.go_to_page(current, page) for page in pages),
            return_exceptions=True,
        )

        by_page: dict[int, list[Any]] = {current.page: _as_list(current.data)}
        for page, result in zip(pages, results):
            if isinstance(result, BaseException):
                if strict:
                    raise result
                self._logger(LogLevel.WARN, "skipping page in get_all_pages", {"page": page, "error": result})
                by_page[page] = []
            else:
                by_page[page] = _as_list(result.data)

        combined: list[Any] = []
        for page in sorted(by_page):
            combined.extend(by_page[page])
        return combined

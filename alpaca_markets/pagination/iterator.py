"""Cursor-driven iteration over paginated endpoints.

A PageIterator wraps a PageFetcher and walks the remote cursor one page at
a time. It has two states:

    Active     -> next() fetches the page for the current token
    Exhausted  -> next() returns an "Iterator exhausted" error, no fetch

The iterator becomes Exhausted once a page with an empty continuation token
has been returned (that page's items are still handed to the caller). A
failed fetch leaves the state untouched so the same call can be repeated.

Usage:
    iterator = PageIterator(TradesFetcher(client, "AAPL", start, end))

    while iterator.has_more():
        result = iterator.next()
        if not result.is_success:
            break
        process(result.data.items)

Instances are not thread-safe; confine each one to a single task.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar

from alpaca_markets.core.errors import IteratorExhaustedError
from alpaca_markets.core.types import FetchResult, Page
from alpaca_markets.observability.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageFetcher(Protocol[T_co]):
    """Fetches one page of a paginated endpoint.

    An empty page_token means "fetch the first page". Implementations copy
    the remote continuation token into Page.next_page_token verbatim and
    report failures as error results instead of raising.
    """

    def fetch(self, page_token: str) -> FetchResult[Page[T_co]]: ...


class PageIterator(Generic[T]):
    """Stateful cursor over a PageFetcher.

    Attributes:
        fetcher: Source of pages
    """

    def __init__(self, fetcher: PageFetcher[T]) -> None:
        self.fetcher = fetcher
        self._current_token = ""
        self._exhausted = False

    @property
    def current_token(self) -> str:
        """Token that the next fetch will send ("" before the first page)."""
        return self._current_token

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def has_more(self) -> bool:
        """Whether the iterator has not yet seen the last page.

        Optimistic: does not guarantee that the next fetch succeeds or
        returns any items.
        """
        return not self._exhausted

    def next(self) -> FetchResult[Page[T]]:
        """Fetch the next page.

        Returns:
            The fetched page, the fetcher's error result unchanged, or an
            IteratorExhaustedError result carrying an empty page
        """
        if self._exhausted:
            return FetchResult.failure(IteratorExhaustedError(), Page.empty())

        result = self.fetcher.fetch(self._current_token)
        if not result.is_success:
            logger.debug(
                "Page fetch failed, iterator state kept",
                extra={"page_token": self._current_token, "error": str(result.error)},
            )
            return result

        if result.data is None:
            result = FetchResult.success(Page.empty(), latency_ms=result.latency_ms, source=result.source)

        self._current_token = result.data.next_page_token
        if not self._current_token:
            self._exhausted = True

        return result

    def collect_all(self) -> FetchResult[list[T]]:
        """Drain every remaining page into one list.

        Memory use grows with the result set; prefer next() for large ones.

        Returns:
            All items in fetch order, or the first error together with the
            items gathered before it
        """
        items: list[T] = []
        pages = 0
        while self.has_more():
            result = self.next()
            if not result.is_success:
                return FetchResult.failure(result.error, items, source=result.source)
            if result.data is not None:
                items.extend(result.data.items)
            pages += 1

        logger.debug("Collected pages", extra={"pages": pages, "items": len(items)})
        return FetchResult.success(items)

    def iter_pages(self) -> Iterator[Page[T]]:
        """Lazily yield the remaining pages, raising the first fetch error."""
        while self.has_more():
            yield self.next().unwrap()

    def __iter__(self) -> Iterator[T]:
        for page in self.iter_pages():
            yield from page.items

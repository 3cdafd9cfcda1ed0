"""Shared result types.

These types are used by the pagination layer and the REST client.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A bounded batch of results from a paginated endpoint.

    Attributes:
        items: Items in fetch order
        next_page_token: Opaque continuation token ("" means no more pages)
    """

    items: tuple[T, ...] = ()
    next_page_token: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable, store an immutable copy
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, items: Iterable[T], next_page_token: str | None = "") -> Page[T]:
        """Build a page, treating a missing token as the last page."""
        return cls(items=tuple(items), next_page_token=next_page_token or "")

    @classmethod
    def empty(cls) -> Page[T]:
        return cls()

    @property
    def has_more(self) -> bool:
        """Whether the remote API reported further pages."""
        return bool(self.next_page_token)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Result of a single fetch operation.

    An error result may still carry data: the exhausted-iterator result
    carries an empty page and a failed collection carries the items
    gathered before the failure.

    Attributes:
        data: Fetched data
        error: Error that occurred (if failed)
        latency_ms: Request latency in milliseconds
        source: Endpoint or adapter name
    """

    data: T | None = None
    error: Exception | None = None
    latency_ms: float = 0.0
    source: str = field(default="", compare=False)

    @classmethod
    def success(cls, data: T, *, latency_ms: float = 0.0, source: str = "") -> FetchResult[T]:
        return cls(data=data, latency_ms=latency_ms, source=source)

    @classmethod
    def failure(
        cls,
        error: Exception,
        data: T | None = None,
        *,
        latency_ms: float = 0.0,
        source: str = "",
    ) -> FetchResult[T]:
        return cls(data=data, error=error, latency_ms=latency_ms, source=source)

    @property
    def is_success(self) -> bool:
        """Whether the fetch was successful."""
        return self.error is None

    @property
    def is_retryable(self) -> bool:
        """Whether the error is retryable."""
        if self.error is None:
            return False
        from .errors import AlpacaError

        if isinstance(self.error, AlpacaError):
            return self.error.is_retryable
        return False

    def unwrap(self) -> T:
        """Return the data, raising the error if the fetch failed."""
        if self.error is not None:
            raise self.error
        return self.data  # type: ignore[return-value]

"""Cursor-based pagination helper."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50

# Cursor value meaning "first page" on input and "no further page" on output.
NO_MORE_PAGES = 0


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing and the cursor of the page after it."""

    items: Sequence[T] = field(default_factory=tuple)
    next_cursor: int | None = NO_MORE_PAGES

    @property
    def is_last(self) -> bool:
        return not self.next_cursor


FetchPage = Callable[[int, int], Awaitable[Page[T]]]


class PagedEnumerator(Generic[T]):
    """Walks a paged listing from the first page to the last.

    ``fetch_page(cursor, page_size)`` is called with ``NO_MORE_PAGES`` for
    the first page and with each returned ``next_cursor`` after that.
    A failing fetch is logged and ends the walk; nothing is retried.
    """

    def __init__(
        self,
        fetch_page: FetchPage[T],
        page_size: int = DEFAULT_PAGE_SIZE,
        label: str = "listing",
    ) -> None:
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._label = label

    async def run(self, sink: Callable[[T], Awaitable[None]]) -> int:
        """Forward every item of every page to ``sink``.

        Returns the number of items forwarded.
        """
        cursor: int = NO_MORE_PAGES
        forwarded = 0
        pages = 0

        while True:
            try:
                page = await self._fetch_page(cursor, self._page_size)
            except Exception as e:
                logger.warning(
                    "Listing page failed, stopping",
                    listing=self._label,
                    cursor=cursor,
                    error=str(e),
                )
                break

            pages += 1
            for item in page.items:
                await sink(item)
                forwarded += 1

            if page.is_last:
                break
            cursor = page.next_cursor

        logger.debug(
            "Listing finished",
            listing=self._label,
            pages=pages,
            items=forwarded,
        )
        return forwarded

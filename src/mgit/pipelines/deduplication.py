"""Deduplication of repositories seen by several sources."""

import asyncio
from collections.abc import AsyncIterator, Iterable, Iterator

import structlog

from mgit.core.models.repository import RemoteRepoDescriptor
from mgit.sources.base import END_OF_STREAM

logger = structlog.get_logger(__name__)


class Deduplicator:
    """Passes each repository URL through once; the first sighting wins.

    The seen set lives for one pipeline run and is only touched by the
    single loop consuming the merged stream, so producers never share it.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self.duplicate_count = 0

    @property
    def seen_count(self) -> int:
        return len(self._seen)

    def accept(self, descriptor: RemoteRepoDescriptor) -> bool:
        """Record ``descriptor`` and tell whether it is the first of its URL."""
        if descriptor.url in self._seen:
            self.duplicate_count += 1
            logger.debug("Dropping duplicate", name=descriptor.name, url=descriptor.url)
            return False
        self._seen.add(descriptor.url)
        return True

    async def stream(
        self, inbox: asyncio.Queue, producers: int
    ) -> AsyncIterator[RemoteRepoDescriptor]:
        """Drain ``inbox`` until ``producers`` end-of-stream markers arrived."""
        finished = 0
        while finished < producers:
            item = await inbox.get()
            if item is END_OF_STREAM:
                finished += 1
                continue
            if self.accept(item):
                yield item


def deduplicate(
    descriptors: Iterable[RemoteRepoDescriptor],
) -> Iterator[RemoteRepoDescriptor]:
    """Synchronous counterpart of ``Deduplicator.stream``."""
    deduplicator = Deduplicator()
    for descriptor in descriptors:
        if deduplicator.accept(descriptor):
            yield descriptor

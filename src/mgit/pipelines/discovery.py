"""Discovery and clone pipeline.

Remote sources run as concurrent producer tasks feeding one bounded
queue. A single deduplicating consumer drains it, and the driving loop
matches each repository against the configured locations and clones it,
one action at a time.
"""

import asyncio
from collections.abc import AsyncIterator, Sequence
from contextlib import aclosing

import structlog

from mgit.config.settings import Settings, get_settings
from mgit.core.exceptions import SyncError
from mgit.core.models.config import Config, Location
from mgit.core.models.repository import RemoteRepoDescriptor
from mgit.core.models.sync import SyncResult
from mgit.git.executor import GitCommandRunner
from mgit.git.sync import SyncExecutor
from mgit.pipelines.deduplication import Deduplicator
from mgit.pipelines.matching import LocationMatcher
from mgit.sources.base import RemoteSource
from mgit.sources.factory import SourceFactory

logger = structlog.get_logger(__name__)


async def scaffold(
    sources: Sequence[RemoteSource], queue_size: int = 100
) -> AsyncIterator[RemoteRepoDescriptor]:
    """Merge every source into one stream with each URL appearing once.

    Producer tasks are cancelled and sources closed when the stream is
    exhausted or closed early.
    """
    queue: asyncio.Queue = asyncio.Queue(maxsize=queue_size)
    deduplicator = Deduplicator()
    tasks = [
        asyncio.create_task(source.scaffold(queue), name=f"scaffold-{source.name}")
        for source in sources
    ]

    try:
        async with aclosing(deduplicator.stream(queue, producers=len(tasks))) as merged:
            async for descriptor in merged:
                yield descriptor
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        for source in sources:
            await source.aclose()
        logger.info(
            "Discovery finished",
            repositories=deduplicator.seen_count,
            duplicates=deduplicator.duplicate_count,
        )


async def discover(
    config: Config,
    settings: Settings | None = None,
    sources: Sequence[RemoteSource] | None = None,
) -> AsyncIterator[tuple[RemoteRepoDescriptor, list[Location]]]:
    """Yield each distinct repository with the locations that want it."""
    settings = settings or get_settings()
    if sources is None:
        sources = SourceFactory(config, settings).create_sources()
    matcher = LocationMatcher()

    async with aclosing(scaffold(sources, settings.queue_size)) as repositories:
        async for repo in repositories:
            yield repo, list(matcher.matching_locations(config.locations, repo))


async def run_discovery_and_clone(
    config: Config,
    settings: Settings | None = None,
    sources: Sequence[RemoteSource] | None = None,
    executor: SyncExecutor | None = None,
    fail_fast: bool = False,
) -> AsyncIterator[SyncResult]:
    """Clone every discovered repository into every location wanting it.

    Yields one result per (repository, location) match. Failures are
    yielded and processing goes on, unless ``fail_fast`` is set: then
    the failed result is yielded and ``SyncError`` raised after it.
    """
    settings = settings or get_settings()
    executor = executor or SyncExecutor(GitCommandRunner(settings.git_binary))

    async with aclosing(discover(config, settings, sources)) as matches:
        async for repo, locations in matches:
            if not locations:
                logger.debug("No location wants repository", url=repo.url)
            for location in locations:
                result = await asyncio.to_thread(executor.clone, repo, location)
                yield result
                if fail_fast and not result.ok:
                    raise SyncError(
                        f"Clone of {repo.url} failed: {result.error}",
                        details={"url": repo.url, "directory": str(result.directory)},
                    )

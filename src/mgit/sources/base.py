"""Remote source interface."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import structlog

from mgit.core.models.repository import RemoteRepoDescriptor

logger = structlog.get_logger(__name__)

# Put on the sink once a source has finished every listing category.
END_OF_STREAM = object()

Emit = Callable[[RemoteRepoDescriptor], Awaitable[None]]


class RemoteSource(ABC):
    """A remote account whose visible repositories can be enumerated.

    Subclasses implement ``enumerate``; ``scaffold`` wires it to a queue
    and puts the end-of-stream marker exactly once, after enumeration
    has finished or failed. Errors escaping ``enumerate`` are logged,
    never raised, so sibling sources keep going.
    """

    name: str = "remote"

    async def scaffold(self, sink: asyncio.Queue) -> int:
        """Emit every visible repository into ``sink``, then END_OF_STREAM."""
        emitted = 0

        async def emit(descriptor: RemoteRepoDescriptor) -> None:
            nonlocal emitted
            await sink.put(descriptor)
            emitted += 1

        logger.info("Scaffolding repositories", source=self.name)
        try:
            await self.enumerate(emit)
        except Exception as e:
            logger.error("Source failed", source=self.name, error=str(e))

        # Not reached on cancellation: nobody is left to read the marker.
        await sink.put(END_OF_STREAM)
        logger.info("Source finished", source=self.name, emitted=emitted)
        return emitted

    @abstractmethod
    async def enumerate(self, emit: Emit) -> None:
        """Call ``emit`` once per repository seen in every listing category."""

    async def aclose(self) -> None:
        """Release network resources held by the source."""

"""Matching of repositories against configured locations."""

import re
from collections.abc import Iterable, Iterator

import structlog

from mgit.core.models.config import Location
from mgit.core.models.repository import RemoteRepoDescriptor

logger = structlog.get_logger(__name__)


class LocationMatcher:
    """Decides which locations want a repository.

    A location wants a repository when its pattern is found anywhere in
    the repository URL (``re.search``, not anchored). A pattern that
    does not compile is reported once and never matches.
    """

    def __init__(self) -> None:
        self._compiled: dict[str, re.Pattern[str] | None] = {}

    def _compile(self, pattern: str) -> re.Pattern[str] | None:
        if pattern not in self._compiled:
            try:
                self._compiled[pattern] = re.compile(pattern)
            except re.error as e:
                logger.warning("Unable to match regex", pattern=pattern, error=str(e))
                self._compiled[pattern] = None
        return self._compiled[pattern]

    def wants(self, location: Location, descriptor: RemoteRepoDescriptor) -> bool:
        regex = self._compile(location.pattern)
        if regex is None:
            return False
        return regex.search(descriptor.url) is not None

    def matching_locations(
        self, locations: Iterable[Location], descriptor: RemoteRepoDescriptor
    ) -> Iterator[Location]:
        """Yield the locations wanting ``descriptor``, in configuration order."""
        for location in locations:
            if self.wants(location, descriptor):
                yield location

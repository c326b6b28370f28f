"""Remote repository sources."""

from mgit.sources.base import END_OF_STREAM, RemoteSource
from mgit.sources.factory import SourceFactory
from mgit.sources.github import GitHubSource
from mgit.sources.paging import DEFAULT_PAGE_SIZE, Page, PagedEnumerator

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "END_OF_STREAM",
    "GitHubSource",
    "Page",
    "PagedEnumerator",
    "RemoteSource",
    "SourceFactory",
]

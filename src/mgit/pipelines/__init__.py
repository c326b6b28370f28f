"""Synchronization pipelines for mgit."""

from mgit.pipelines.deduplication import Deduplicator, deduplicate
from mgit.pipelines.discovery import discover, run_discovery_and_clone, scaffold
from mgit.pipelines.fetch import run_local_fetch
from mgit.pipelines.matching import LocationMatcher

__all__ = [
    "Deduplicator",
    "LocationMatcher",
    "deduplicate",
    "discover",
    "run_discovery_and_clone",
    "run_local_fetch",
    "scaffold",
]

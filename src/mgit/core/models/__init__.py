"""Domain models for mgit."""

from mgit.core.models.config import (
    Config,
    GitHubSourceConfig,
    Location,
    SourcesConfig,
    expand_placeholders,
)
from mgit.core.models.repository import LocalRepoDescriptor, RemoteRepoDescriptor
from mgit.core.models.sync import SyncAction, SyncReport, SyncResult, SyncStatus

__all__ = [
    "Config",
    "GitHubSourceConfig",
    "Location",
    "SourcesConfig",
    "expand_placeholders",
    "RemoteRepoDescriptor",
    "LocalRepoDescriptor",
    "SyncAction",
    "SyncStatus",
    "SyncResult",
    "SyncReport",
]

"""Core domain models and exceptions for mgit."""

from mgit.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GitCommandError,
    MGitError,
    RateLimitError,
    SourceError,
    SyncError,
)
from mgit.core.models import (
    Config,
    GitHubSourceConfig,
    LocalRepoDescriptor,
    Location,
    RemoteRepoDescriptor,
    SourcesConfig,
    SyncAction,
    SyncReport,
    SyncResult,
    SyncStatus,
)

__all__ = [
    # Models
    "Config",
    "GitHubSourceConfig",
    "Location",
    "SourcesConfig",
    "RemoteRepoDescriptor",
    "LocalRepoDescriptor",
    "SyncAction",
    "SyncStatus",
    "SyncResult",
    "SyncReport",
    # Exceptions
    "MGitError",
    "ConfigurationError",
    "SourceError",
    "AuthenticationError",
    "RateLimitError",
    "GitCommandError",
    "SyncError",
]

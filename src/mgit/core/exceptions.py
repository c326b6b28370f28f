"""Exception hierarchy for mgit."""

from typing import Any


class MGitError(Exception):
    """Base exception for all mgit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MGitError):
    """Raised when the configuration file is missing or invalid."""


class SourceError(MGitError):
    """Raised when a remote source fails to list repositories."""


class AuthenticationError(SourceError):
    """Raised when a remote source rejects the configured credentials."""


class RateLimitError(SourceError):
    """Raised when a remote source refuses requests due to rate limiting."""


class GitCommandError(MGitError):
    """Raised when the external git executable fails."""

    def __init__(
        self,
        message: str,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.stderr = stderr


class SyncError(MGitError):
    """Raised when a synchronization run is halted by a failed action."""

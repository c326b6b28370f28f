"""Configuration file models."""

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


def expand_placeholders(value: str) -> str:
    """Expand ``$VAR``, ``${VAR}`` and ``~`` placeholders in a path template."""
    return os.path.expanduser(os.path.expandvars(value))


class Location(BaseModel):
    """A local directory paired with a pattern over remote repository URLs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    directory: str = Field(..., description="Target directory, may contain $VAR placeholders")
    pattern: str = Field(
        ...,
        alias="repository",
        description="Regular expression searched for in the repository URL",
    )

    def resolve_directory(self) -> Path:
        """Return the target directory with placeholders expanded."""
        return Path(expand_placeholders(self.directory))

    def pattern_error(self) -> str | None:
        """Return why the pattern does not compile, or None if it does."""
        try:
            re.compile(self.pattern)
        except re.error as e:
            return str(e)
        return None


class GitHubSourceConfig(BaseModel):
    """Credentials for the GitHub source."""

    token: str = Field(..., description="Personal access token")
    api_url: str | None = Field(
        default=None, description="API base URL (defaults to settings.github_api_url)"
    )
    enabled: bool = Field(default=True)


class SourcesConfig(BaseModel):
    """Remote sources, keyed by provider."""

    github: GitHubSourceConfig | None = None


class Config(BaseModel):
    """Root configuration model."""

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    locations: list[Location] = Field(default_factory=list)

"""Factory for creating remote sources."""

from typing import TYPE_CHECKING

import structlog

from mgit.core.models.config import Config
from mgit.sources.base import RemoteSource

if TYPE_CHECKING:
    from mgit.config.settings import Settings

logger = structlog.get_logger(__name__)


class SourceFactory:
    """Creates the remote sources enabled in the configuration."""

    def __init__(self, config: Config, settings: "Settings") -> None:
        self._config = config
        self._settings = settings

    def create_sources(self) -> list[RemoteSource]:
        sources: list[RemoteSource] = []

        github = self._config.sources.github
        if github is not None and github.enabled:
            from mgit.sources.github import GitHubSource

            sources.append(
                GitHubSource(
                    token=github.token,
                    api_url=github.api_url or self._settings.github_api_url,
                    timeout=self._settings.request_timeout,
                )
            )

        if not sources:
            logger.warning("No remote sources enabled in config")
        else:
            logger.debug("Remote sources created", sources=[s.name for s in sources])
        return sources

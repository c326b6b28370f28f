"""Local fetch pipeline."""

from collections.abc import Iterator

import structlog

from mgit.config.settings import Settings, get_settings
from mgit.core.models.config import Config
from mgit.core.models.sync import SyncResult
from mgit.git.executor import GitCommandRunner
from mgit.git.scanner import LocalRepoScanner
from mgit.git.sync import SyncExecutor

logger = structlog.get_logger(__name__)


def run_local_fetch(
    config: Config,
    settings: Settings | None = None,
    scanner: LocalRepoScanner | None = None,
    executor: SyncExecutor | None = None,
) -> Iterator[SyncResult]:
    """Fetch every working copy found under the configured locations.

    Each repository is handled on its own; a failure is yielded and the
    pass continues.
    """
    settings = settings or get_settings()
    scanner = scanner or LocalRepoScanner()
    executor = executor or SyncExecutor(GitCommandRunner(settings.git_binary))

    # Several locations may share a directory; walk it once.
    roots = list(dict.fromkeys(location.resolve_directory() for location in config.locations))
    logger.info("Scanning for local repositories", roots=[str(r) for r in roots])

    for local in scanner.scan(roots):
        yield executor.fetch(local)

"""Clone and fetch actions for matched repositories."""

from pathlib import Path

import structlog

from mgit.core.exceptions import GitCommandError
from mgit.core.models.config import Location
from mgit.core.models.repository import LocalRepoDescriptor, RemoteRepoDescriptor
from mgit.core.models.sync import SyncAction, SyncResult, SyncStatus
from mgit.git.executor import GitCommandRunner

logger = structlog.get_logger(__name__)


class SyncExecutor:
    """Performs clone and fetch actions and reports their outcome.

    Failures never raise; they come back as results with
    ``SyncStatus.FAILED`` so the caller decides whether to go on.
    """

    def __init__(
        self,
        runner: GitCommandRunner | None = None,
        verify_remote: bool = False,
    ) -> None:
        self._runner = runner or GitCommandRunner()
        self._verify_remote = verify_remote

    def clone(self, descriptor: RemoteRepoDescriptor, location: Location) -> SyncResult:
        """Clone ``descriptor`` into ``location`` unless it is already there."""
        directory = location.resolve_directory()
        target = directory / descriptor.name

        def result(status: SyncStatus, error: str | None = None) -> SyncResult:
            return SyncResult(
                action=SyncAction.CLONE,
                status=status,
                directory=target,
                repository=descriptor,
                error=error,
            )

        try:
            self._ensure_directory(directory)
        except OSError as e:
            logger.error("Unable to prepare location", directory=str(directory), error=str(e))
            return result(SyncStatus.FAILED, str(e))

        if target.is_dir():
            if self._verify_remote and not self._runner.dry_run:
                actual = self._runner.remote_url(target)
                if actual != descriptor.url:
                    error = (
                        f"{target} exists but its origin is {actual or 'unset'}, "
                        f"expected {descriptor.url}"
                    )
                    logger.error("Existing clone points elsewhere", path=str(target), origin=actual)
                    return result(SyncStatus.FAILED, error)
            logger.info("Repository already exists", path=str(target))
            return result(SyncStatus.EXISTS)

        logger.info("Cloning", url=descriptor.url, path=str(target))
        try:
            self._runner.clone(descriptor.url, descriptor.name, cwd=directory)
        except GitCommandError as e:
            logger.error("Clone failed", url=descriptor.url, path=str(target), error=e.message)
            return result(SyncStatus.FAILED, e.message)

        if self._runner.dry_run:
            return result(SyncStatus.SKIPPED)
        return result(SyncStatus.CLONED)

    def fetch(self, local: LocalRepoDescriptor) -> SyncResult:
        """Run ``git fetch`` in a local working copy."""
        logger.info("Fetching", path=str(local.directory))
        try:
            self._runner.fetch(cwd=local.directory)
        except GitCommandError as e:
            logger.error("Fetch failed", path=str(local.directory), error=e.message)
            return SyncResult(
                action=SyncAction.FETCH,
                status=SyncStatus.FAILED,
                directory=local.directory,
                error=e.message,
            )

        return SyncResult(
            action=SyncAction.FETCH,
            status=SyncStatus.SKIPPED if self._runner.dry_run else SyncStatus.FETCHED,
            directory=local.directory,
        )

    def _ensure_directory(self, directory: Path) -> None:
        if directory.exists():
            if not directory.is_dir():
                raise NotADirectoryError(
                    f"Unable to create directory {directory} - already exists"
                )
            return
        if self._runner.dry_run:
            logger.info("Dry run, not creating directory", directory=str(directory))
            return
        logger.info("Creating directory", directory=str(directory))
        directory.mkdir(parents=True, exist_ok=True)

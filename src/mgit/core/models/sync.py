"""Synchronization result models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mgit.core.models.repository import RemoteRepoDescriptor


class SyncAction(str, Enum):
    """Kind of synchronization performed."""

    CLONE = "clone"
    FETCH = "fetch"


class SyncStatus(str, Enum):
    """Outcome of a synchronization action."""

    CLONED = "cloned"
    EXISTS = "exists"
    FETCHED = "fetched"
    SKIPPED = "skipped"
    FAILED = "failed"


class SyncResult(BaseModel):
    """Outcome of one clone or fetch."""

    model_config = ConfigDict(frozen=True)

    action: SyncAction
    status: SyncStatus
    directory: Path
    repository: RemoteRepoDescriptor | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != SyncStatus.FAILED


class SyncReport(BaseModel):
    """All results of a synchronization run."""

    results: list[SyncResult] = Field(default_factory=list)

    def add(self, result: SyncResult) -> SyncResult:
        self.results.append(result)
        return result

    @property
    def failures(self) -> list[SyncResult]:
        return [r for r in self.results if not r.ok]

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def summary(self) -> dict[str, int]:
        """Count results per status."""
        counts = {status.value: 0 for status in SyncStatus}
        for result in self.results:
            counts[result.status.value] += 1
        return counts

"""Git integration module for mgit."""

from mgit.git.executor import GitCommandRunner
from mgit.git.scanner import GIT_MARKER, LocalRepoScanner
from mgit.git.sync import SyncExecutor

__all__ = ["GIT_MARKER", "GitCommandRunner", "LocalRepoScanner", "SyncExecutor"]

"""External git invocation using subprocess."""

import subprocess
from pathlib import Path

import structlog

from mgit.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)


class GitCommandRunner:
    """Runs the git CLI in a working directory.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, git_binary: str = "git", dry_run: bool = False) -> None:
        self._git = git_binary
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def run(self, *args: str, cwd: Path) -> str:
        """Run a git command and return stdout."""
        command = [self._git, *args]
        if self._dry_run:
            logger.info("Dry run, not executing", command=" ".join(command), cwd=str(cwd))
            return ""

        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise GitCommandError(
                f"git {args[0]} failed with exit code {e.returncode}: {stderr}",
                stderr=stderr,
                details={"command": command, "cwd": str(cwd)},
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                f"Unable to run git {args[0]} in {cwd}: {e}",
                details={"command": command, "cwd": str(cwd)},
            ) from e
        return result.stdout.strip()

    def clone(self, url: str, name: str, cwd: Path) -> None:
        self.run("clone", url, name, cwd=cwd)

    def fetch(self, cwd: Path) -> None:
        self.run("fetch", cwd=cwd)

    def remote_url(self, cwd: Path, remote: str = "origin") -> str | None:
        """Get a remote's URL, if configured."""
        try:
            url = self.run("remote", "get-url", remote, cwd=cwd)
        except GitCommandError:
            return None
        return url or None

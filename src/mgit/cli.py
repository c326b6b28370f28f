"""CLI for mgit."""

import asyncio
import sys

import click
import structlog

from mgit.config.logging import configure_logging
from mgit.config.settings import get_settings
from mgit.core.exceptions import ConfigurationError, SyncError
from mgit.core.models.config import Config
from mgit.core.models.sync import SyncReport, SyncResult

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _load(config_path: str | None) -> Config:
    from mgit.config.loader import load_config

    path = config_path or get_settings().config_path
    try:
        return load_config(path)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def _echo_result(result: SyncResult) -> None:
    line = f"  [{result.status.value:>7}] {result.directory}"
    if result.error:
        line += f"\n            {result.error}"
    click.echo(line)


def _finish(report: SyncReport) -> None:
    counts = ", ".join(f"{n} {status}" for status, n in report.summary().items() if n)
    click.echo(f"\nDone: {counts or 'nothing to do'}")
    if not report.succeeded:
        click.echo(f"{len(report.failures)} action(s) failed:", err=True)
        for failure in report.failures:
            click.echo(f"  {failure.directory}: {failure.error}", err=True)
        sys.exit(1)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    help="Config file (default: $HOME/.mgit/config.json or MGIT_CONFIG_PATH)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool) -> None:
    """mgit: keep local clones of every repository you can see."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=json_logs or settings.json_logs)


@cli.command()
@config_option
@click.option("--fail-fast", is_flag=True, help="Stop at the first failed clone")
@click.option("--dry-run", is_flag=True, help="Show what would be cloned")
@click.option(
    "--verify-remote",
    is_flag=True,
    help="Fail when an existing clone's origin differs from the expected URL",
)
def clone(config_path: str | None, fail_fast: bool, dry_run: bool, verify_remote: bool) -> None:
    """Discover remote repositories and clone the missing ones.

    Every repository is cloned into each location whose pattern matches
    its URL.
    """
    from mgit.git.executor import GitCommandRunner
    from mgit.git.sync import SyncExecutor
    from mgit.pipelines.discovery import run_discovery_and_clone

    config = _load(config_path)
    settings = get_settings()
    executor = SyncExecutor(
        GitCommandRunner(settings.git_binary, dry_run=dry_run),
        verify_remote=verify_remote,
    )
    report = SyncReport()

    async def _clone():
        async for result in run_discovery_and_clone(
            config, settings, executor=executor, fail_fast=fail_fast
        ):
            _echo_result(report.add(result))

    try:
        run_async(_clone())
    except SyncError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    _finish(report)


@cli.command()
@config_option
@click.option("--dry-run", is_flag=True, help="List repositories without fetching")
def fetch(config_path: str | None, dry_run: bool) -> None:
    """Run git fetch in every working copy under the configured locations."""
    from mgit.git.executor import GitCommandRunner
    from mgit.git.sync import SyncExecutor
    from mgit.pipelines.fetch import run_local_fetch

    config = _load(config_path)
    settings = get_settings()
    executor = SyncExecutor(GitCommandRunner(settings.git_binary, dry_run=dry_run))
    report = SyncReport()

    for result in run_local_fetch(config, settings, executor=executor):
        _echo_result(report.add(result))

    _finish(report)


@cli.command()
@config_option
def sources(config_path: str | None) -> None:
    """List remote repositories and the locations that want them."""
    from mgit.pipelines.discovery import discover

    config = _load(config_path)

    async def _sources():
        total = 0
        async for repo, locations in discover(config, get_settings()):
            total += 1
            click.echo(f"{repo.name}  {repo.url}")
            for location in locations:
                click.echo(f"    -> {location.resolve_directory()}")
        click.echo(f"\n{total} repositories")

    run_async(_sources())


if __name__ == "__main__":
    cli()

"""Tests for the local fetch pipeline."""

from pathlib import Path

import pytest

from fakes import FakeGitRunner
from mgit.config.settings import Settings
from mgit.core.models.config import Config, Location
from mgit.core.models.sync import SyncAction, SyncStatus
from mgit.git.sync import SyncExecutor
from mgit.pipelines.fetch import run_local_fetch


def make_repo(path: Path) -> Path:
    (path / ".git").mkdir(parents=True)
    return path


@pytest.mark.unit
class TestRunLocalFetch:
    """Tests for run_local_fetch."""

    def test_fetches_every_working_copy(
        self, tmp_path: Path, settings: Settings, fake_git: FakeGitRunner
    ) -> None:
        a = make_repo(tmp_path / "work" / "a")
        c = make_repo(tmp_path / "work" / "b" / "c")
        config = Config(locations=[Location(directory=str(tmp_path / "work"), pattern=".")])

        results = list(run_local_fetch(config, settings, executor=SyncExecutor(fake_git)))

        assert {r.directory for r in results} == {a, c}
        assert all(r.action == SyncAction.FETCH for r in results)
        assert all(r.status == SyncStatus.FETCHED for r in results)
        assert {cwd for _, cwd in fake_git.commands("fetch")} == {a, c}

    def test_failure_does_not_stop_pass(self, tmp_path: Path, settings: Settings) -> None:
        a = make_repo(tmp_path / "a")
        b = make_repo(tmp_path / "b")
        runner = FakeGitRunner(fail_dirs={a})
        config = Config(locations=[Location(directory=str(tmp_path), pattern=".")])

        results = {r.directory: r for r in run_local_fetch(config, settings, executor=SyncExecutor(runner))}

        assert results[a].status == SyncStatus.FAILED
        assert "fetch failed" in results[a].error
        assert results[b].status == SyncStatus.FETCHED

    def test_shared_directory_scanned_once(
        self, tmp_path: Path, settings: Settings, fake_git: FakeGitRunner
    ) -> None:
        make_repo(tmp_path / "a")
        config = Config(
            locations=[
                Location(directory=str(tmp_path), pattern="^git@host:org/"),
                Location(directory=str(tmp_path), pattern="^git@host:other/"),
            ]
        )
        results = list(run_local_fetch(config, settings, executor=SyncExecutor(fake_git)))
        assert len(results) == 1

    def test_missing_location_directory(
        self, tmp_path: Path, settings: Settings, fake_git: FakeGitRunner
    ) -> None:
        a = make_repo(tmp_path / "present" / "a")
        config = Config(
            locations=[
                Location(directory=str(tmp_path / "missing"), pattern="."),
                Location(directory=str(tmp_path / "present"), pattern="."),
            ]
        )
        results = list(run_local_fetch(config, settings, executor=SyncExecutor(fake_git)))
        assert [r.directory for r in results] == [a]

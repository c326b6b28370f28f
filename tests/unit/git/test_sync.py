"""Tests for the sync executor."""

from pathlib import Path

import pytest

from factories import LocalRepoDescriptorFactory, LocationFactory
from fakes import FakeGitRunner
from mgit.core.models.repository import RemoteRepoDescriptor
from mgit.core.models.sync import SyncAction, SyncStatus
from mgit.git.executor import GitCommandRunner
from mgit.git.sync import SyncExecutor

FOO = RemoteRepoDescriptor(name="foo", url="git@host:org/foo.git")


@pytest.mark.unit
class TestClone:
    """Tests for SyncExecutor.clone."""

    def test_clone_creates_location(self, tmp_path: Path, fake_git: FakeGitRunner) -> None:
        location = LocationFactory(directory=str(tmp_path / "repos" / "org"))
        result = SyncExecutor(fake_git).clone(FOO, location)

        assert result.action == SyncAction.CLONE
        assert result.status == SyncStatus.CLONED
        assert result.directory == tmp_path / "repos" / "org" / "foo"
        assert result.repository == FOO
        assert (tmp_path / "repos" / "org").is_dir()
        assert fake_git.calls == [(("clone", FOO.url, "foo"), tmp_path / "repos" / "org")]

    def test_clone_is_idempotent(self, tmp_path: Path, fake_git: FakeGitRunner) -> None:
        location = LocationFactory(directory=str(tmp_path))
        executor = SyncExecutor(fake_git)

        first = executor.clone(FOO, location)
        second = executor.clone(FOO, location)

        assert first.status == SyncStatus.CLONED
        assert second.status == SyncStatus.EXISTS
        assert second.ok
        assert len(fake_git.commands("clone")) == 1

    def test_location_is_a_file(self, tmp_path: Path, fake_git: FakeGitRunner) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        result = SyncExecutor(fake_git).clone(FOO, LocationFactory(directory=str(blocker)))

        assert result.status == SyncStatus.FAILED
        assert "already exists" in result.error
        assert fake_git.calls == []

    def test_clone_failure_reported(self, tmp_path: Path) -> None:
        runner = FakeGitRunner(fail_urls={FOO.url})
        result = SyncExecutor(runner).clone(FOO, LocationFactory(directory=str(tmp_path)))

        assert result.status == SyncStatus.FAILED
        assert not result.ok
        assert FOO.url in result.error

    def test_location_placeholders(
        self, tmp_path: Path, fake_git: FakeGitRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MGIT_TEST_ROOT", str(tmp_path))
        location = LocationFactory(directory="$MGIT_TEST_ROOT/src")
        result = SyncExecutor(fake_git).clone(FOO, location)
        assert result.directory == tmp_path / "src" / "foo"

    def test_verify_remote_accepts_matching_origin(self, tmp_path: Path) -> None:
        (tmp_path / "foo").mkdir()
        runner = FakeGitRunner(remotes={tmp_path / "foo": FOO.url})
        result = SyncExecutor(runner, verify_remote=True).clone(
            FOO, LocationFactory(directory=str(tmp_path))
        )
        assert result.status == SyncStatus.EXISTS

    def test_verify_remote_rejects_other_origin(self, tmp_path: Path) -> None:
        (tmp_path / "foo").mkdir()
        runner = FakeGitRunner(remotes={tmp_path / "foo": "git@host:someone/foo.git"})
        result = SyncExecutor(runner, verify_remote=True).clone(
            FOO, LocationFactory(directory=str(tmp_path))
        )
        assert result.status == SyncStatus.FAILED
        assert "git@host:someone/foo.git" in result.error
        assert runner.commands("clone") == []

    def test_existing_directory_not_verified_by_default(self, tmp_path: Path) -> None:
        (tmp_path / "foo").mkdir()
        runner = FakeGitRunner()
        result = SyncExecutor(runner).clone(FOO, LocationFactory(directory=str(tmp_path)))
        assert result.status == SyncStatus.EXISTS
        assert runner.calls == []

    def test_dry_run(self, tmp_path: Path) -> None:
        location = LocationFactory(directory=str(tmp_path / "new"))
        result = SyncExecutor(GitCommandRunner(dry_run=True)).clone(FOO, location)

        assert result.status == SyncStatus.SKIPPED
        assert not (tmp_path / "new").exists()


@pytest.mark.unit
class TestFetch:
    """Tests for SyncExecutor.fetch."""

    def test_fetch(self, fake_git: FakeGitRunner) -> None:
        local = LocalRepoDescriptorFactory()
        result = SyncExecutor(fake_git).fetch(local)

        assert result.action == SyncAction.FETCH
        assert result.status == SyncStatus.FETCHED
        assert result.repository is None
        assert fake_git.calls == [(("fetch",), local.directory)]

    def test_fetch_failure(self) -> None:
        local = LocalRepoDescriptorFactory()
        runner = FakeGitRunner(fail_dirs={local.directory})
        result = SyncExecutor(runner).fetch(local)

        assert result.status == SyncStatus.FAILED
        assert result.error

"""Tests for the command line interface."""

import json
import logging
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from mgit.cli import cli


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging handlers bound to the runner's temporary streams."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def write_config(path: Path, locations: list[dict]) -> Path:
    path.write_text(json.dumps({"sources": {}, "locations": locations}), encoding="utf-8")
    return path


@pytest.mark.unit
class TestCli:
    """Tests for the mgit command group."""

    def test_missing_config(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["fetch", "--config", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_fetch_dry_run(self, tmp_path: Path) -> None:
        (tmp_path / "work" / "a" / ".git").mkdir(parents=True)
        config = write_config(
            tmp_path / "config.json",
            [{"directory": str(tmp_path / "work"), "repository": "."}],
        )
        result = CliRunner().invoke(cli, ["fetch", "--config", str(config), "--dry-run"])

        assert result.exit_code == 0
        assert str(tmp_path / "work" / "a") in result.output
        assert "1 skipped" in result.output

    def test_fetch_failure_exit_code(self, tmp_path: Path) -> None:
        # An empty .git directory is not a usable repository
        (tmp_path / "work" / "broken" / ".git").mkdir(parents=True)
        config = write_config(
            tmp_path / "config.json",
            [{"directory": str(tmp_path / "work"), "repository": "."}],
        )
        result = CliRunner().invoke(cli, ["fetch", "--config", str(config)])

        assert result.exit_code == 1
        assert "1 failed" in result.output

    def test_clone_without_sources(self, tmp_path: Path) -> None:
        config = write_config(
            tmp_path / "config.json",
            [{"directory": str(tmp_path / "repos"), "repository": "."}],
        )
        result = CliRunner().invoke(cli, ["clone", "--config", str(config)])

        assert result.exit_code == 0
        assert "nothing to do" in result.output
        assert not (tmp_path / "repos").exists()

    def test_sources_without_sources(self, tmp_path: Path) -> None:
        config = write_config(tmp_path / "config.json", [])
        result = CliRunner().invoke(cli, ["sources", "--config", str(config)])

        assert result.exit_code == 0
        assert "0 repositories" in result.output

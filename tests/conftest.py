"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from fakes import FakeGitRunner
from mgit.config.settings import Settings
from mgit.core.models.config import Config, Location


@pytest.fixture
def settings() -> Settings:
    return Settings(queue_size=4, git_binary="git")


@pytest.fixture
def fake_git() -> FakeGitRunner:
    return FakeGitRunner()


@pytest.fixture
def sample_config(tmp_path: Path) -> Config:
    """Config with one location per organisation."""
    return Config(
        locations=[
            Location(directory=str(tmp_path / "org"), pattern="^git@host:org/"),
            Location(directory=str(tmp_path / "other"), pattern="^git@host:other/"),
        ]
    )

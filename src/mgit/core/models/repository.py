"""Repository descriptor models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class RemoteRepoDescriptor(BaseModel):
    """A repository seen on a remote source.

    Two descriptors with the same ``url`` denote the same repository,
    whatever their ``name``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class LocalRepoDescriptor(BaseModel):
    """A working copy found on the local filesystem."""

    model_config = ConfigDict(frozen=True)

    directory: Path

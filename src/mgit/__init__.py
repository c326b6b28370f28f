"""mgit: discover, clone and fetch every repository an account can see."""

from mgit.pipelines.discovery import run_discovery_and_clone
from mgit.pipelines.fetch import run_local_fetch

__version__ = "0.1.0"

__all__ = ["__version__", "run_discovery_and_clone", "run_local_fetch"]

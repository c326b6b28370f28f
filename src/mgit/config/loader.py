"""Configuration file loader."""

import json
import os
import re
from pathlib import Path

import structlog
from pydantic import ValidationError

from mgit.core.exceptions import ConfigurationError
from mgit.core.models.config import Config, expand_placeholders

logger = structlog.get_logger(__name__)

# $VAR or ${VAR} left behind by os.path.expandvars when VAR is unset.
UNRESOLVED_PLACEHOLDER = re.compile(r"\$(\w+|\{[^}]*\})")


def resolve_config_path(path: str | Path) -> Path:
    """Expand placeholders in a config file path."""
    return Path(expand_placeholders(str(path)))


def load_config(path: str | Path) -> Config:
    """Load and validate the JSON configuration file.

    Environment placeholders are expanded in the file path and in
    source tokens. Location patterns that do not compile are reported
    here but kept, so the matcher can still skip them at run time.
    """
    config_path = resolve_config_path(path)
    logger.debug("Reading config file", path=str(config_path))

    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            details={"path": str(config_path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Unable to read config file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {config_path}: {e}",
            details={"path": str(config_path), "line": e.lineno},
        ) from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid config file {config_path}: {e}",
            details={"path": str(config_path), "errors": e.errors()},
        ) from e

    if config.sources.github is not None:
        github = config.sources.github
        config.sources.github = github.model_copy(
            update={"token": os.path.expandvars(github.token)}
        )
        unresolved = UNRESOLVED_PLACEHOLDER.search(config.sources.github.token)
        if unresolved and github.enabled:
            raise ConfigurationError(
                f"Unresolved placeholder {unresolved.group(0)} in github token",
                details={"path": str(config_path), "placeholder": unresolved.group(0)},
            )

    for location in config.locations:
        unresolved = UNRESOLVED_PLACEHOLDER.search(location.resolve_directory().as_posix())
        if unresolved:
            logger.warning(
                "Unresolved placeholder in location directory",
                directory=location.directory,
                placeholder=unresolved.group(0),
            )
        error = location.pattern_error()
        if error:
            logger.warning(
                "Invalid location pattern, it will never match",
                directory=location.directory,
                pattern=location.pattern,
                error=error,
            )

    logger.info(
        "Loaded config",
        path=str(config_path),
        locations=len(config.locations),
    )
    return config

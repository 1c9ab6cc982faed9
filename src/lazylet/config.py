"""Configuration loaded from the ``[tool.lazylet]`` table of pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class LetConfig(BaseModel):
    """Settings for declarations and the example runner.

    Attributes:
    ----------
    warn_on_redefinition: bool
        Log a warning when a group declares the same name twice
    concurrency: int
        Number of groups run concurrently (0 for the runner's default maximum)
    verbosity: int
        Runner console verbosity; negative values silence the summary
    """

    model_config = ConfigDict(extra="forbid")

    warn_on_redefinition: bool = True
    concurrency: int = Field(default=1, ge=0)
    verbosity: int = 0


DEFAULT_CONFIG = LetConfig()

_active_config: LetConfig = DEFAULT_CONFIG


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | str | None = None) -> LetConfig:
    """Load and validate ``[tool.lazylet]`` from the nearest pyproject.toml.

    Missing files or tables yield the default configuration.
    """
    if isinstance(start, str):
        start = Path(start)

    path = find_pyproject(start)
    if path is None:
        return LetConfig()

    with path.open("rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("lazylet", {})
    logger.debug("Loaded lazylet config from %s: %s", path, section)
    return LetConfig.model_validate(section)


def get_config() -> LetConfig:
    """Return the process-wide active configuration."""
    return _active_config


def set_config(config: LetConfig) -> LetConfig:
    """Replace the active configuration, returning the previous one."""
    global _active_config
    previous = _active_config
    _active_config = config
    return previous


__all__ = ["DEFAULT_CONFIG", "LetConfig", "find_pyproject", "get_config", "load_config", "set_config"]

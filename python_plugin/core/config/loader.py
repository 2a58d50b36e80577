"""
Configuration loader — reads python-plugin.yml into a PluginConfig.

Reads YAML, validates against the Pydantic schema, then layers
``PYPLUGIN_*`` environment variables on top. A missing file is not
an error: every setting has a default.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# Default config filename
PLUGIN_CONFIG_FILE = "python-plugin.yml"

DEFAULT_RELEASES_URL = (
    "https://raw.githubusercontent.com/moonrepo/python-plugin/master/releases.json"
)
DEFAULT_TAGS_URL = "https://github.com/python/cpython"

# env var -> config field
_ENV_OVERRIDES: dict[str, str] = {
    "PYPLUGIN_RELEASES_URL": "releases_url",
    "PYPLUGIN_TAGS_URL": "tags_url",
    "PYPLUGIN_CACHE_DIR": "cache_dir",
    "PYPLUGIN_CACHE_TTL": "cache_ttl",
    "PYPLUGIN_REQUEST_TIMEOUT": "request_timeout",
}


class ConfigError(Exception):
    """Raised when plugin configuration is invalid or unreadable."""


class PluginConfig(BaseModel):
    """Where the plugin fetches its data and how long it keeps it."""

    releases_url: str = DEFAULT_RELEASES_URL
    tags_url: str = DEFAULT_TAGS_URL
    cache_dir: str = "~/.cache/python-plugin"
    cache_ttl: int = Field(default=86400, ge=0)  # 0 disables the fetch cache
    request_timeout: int = Field(default=30, gt=0)

    @property
    def cache_path(self) -> Path:
        """``cache_dir`` with ``~`` expanded."""
        return Path(self.cache_dir).expanduser()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for python-plugin.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to python-plugin.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PLUGIN_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> PluginConfig:
    """Load and validate plugin configuration.

    Args:
        path: Explicit path to python-plugin.yml. If None, searches upward;
            if nothing is found, defaults are used.

    Returns:
        Validated PluginConfig with environment overrides applied.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    data: dict = {}

    if path is None:
        path = find_config_file()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    if path is not None:
        data = _read_yaml(path)

    for env_var, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            logger.debug("Config override from %s", env_var)
            data[key] = value

    try:
        config = PluginConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid plugin configuration: {e}") from e

    logger.debug(
        "Plugin config: releases=%s tags=%s cache=%s ttl=%ds",
        config.releases_url,
        config.tags_url,
        config.cache_dir,
        config.cache_ttl,
    )
    return config


def _read_yaml(path: Path) -> dict:
    logger.debug("Loading plugin config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data

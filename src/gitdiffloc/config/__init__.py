"""Configuration loading, schema, and defaults."""

from gitdiffloc.config.loader import CONFIG_FILENAME, ConfigError, load_config
from gitdiffloc.config.schema import GitDiffLocConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GitDiffLocConfig",
    "load_config",
]

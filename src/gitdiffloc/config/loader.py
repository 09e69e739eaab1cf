"""Load and merge configuration from .gitdiffloc.toml (or YAML) and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

from gitdiffloc.config.schema import (
    OUTPUT_FORMATS,
    GitConfig,
    GitDiffLocConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".gitdiffloc.toml"

_YAML_SUFFIXES = (".yaml", ".yml")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _parse_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: top level must be a mapping")
    return data


def _read_raw(path: Path) -> Dict[str, Any]:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return _parse_yaml(path)
    return _parse_toml(path)


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a config section dict, ignoring unknown keys."""
    raw = data.get(section) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitDiffLocConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    if not isinstance(cfg.git.timeout, int) or isinstance(cfg.git.timeout, bool) or cfg.git.timeout <= 0:
        raise ConfigError(f"Invalid git timeout {cfg.git.timeout!r}; expected a positive integer")


def _merge_env_overrides(cfg: GitDiffLocConfig) -> None:
    """Apply GITDIFFLOC_* environment variable overrides."""
    if val := os.environ.get("GITDIFFLOC_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITDIFFLOC_TIMEOUT"):
        try:
            timeout = int(val)
        except ValueError:
            timeout = 0
        if timeout > 0:
            cfg.git.timeout = timeout


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitDiffLocConfig:
    """Load, validate, and return a GitDiffLocConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitDiffLocConfig()
    else:
        raw = _read_raw(config_path)
        cfg = GitDiffLocConfig(
            version=str(raw.get("version", "1.0")),
            output=_build_section(raw, OutputConfig, "output"),
            git=_build_section(raw, GitConfig, "git"),
            source=str(config_path),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg

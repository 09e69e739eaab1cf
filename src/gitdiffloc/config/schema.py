"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_header: bool = True


@dataclass
class GitConfig:
    timeout: int = 60  # seconds allowed for a single git invocation
    ignore_whitespace: bool = False


@dataclass
class GitDiffLocConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    git: GitConfig = field(default_factory=GitConfig)
    source: Optional[str] = None  # path the config was read from, if any

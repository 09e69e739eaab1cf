"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gitdiffloc.config.defaults import DEFAULT_TOML
from gitdiffloc.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.output.show_header is True
        assert cfg.git.timeout == 60
        assert cfg.git.ignore_whitespace is False
        assert cfg.source is None

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.git.timeout == 60
        assert cfg.source == str(tmp_path / ".gitdiffloc.toml")

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text(
            'version = "1.0"\n'
            '[output]\n'
            'format = "json"\n'
            'unknown_key = 1\n'
            '[git]\n'
            'timeout = 5\n'
            'ignore_whitespace = true\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"
        assert cfg.git.timeout == 5
        assert cfg.git.ignore_whitespace is True

    def test_yaml_override(self, tmp_path: Path):
        custom = tmp_path / "loc.yaml"
        custom.write_text("output:\n  show_header: false\ngit:\n  timeout: 10\n")
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.output.show_header is False
        assert cfg.git.timeout == 10

    def test_empty_yaml(self, tmp_path: Path):
        custom = tmp_path / "loc.yml"
        custom.write_text("")
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.output.format == "terminal"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_yaml_raises(self, tmp_path: Path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("output: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override=str(bad))

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_timeout_raises(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text("[git]\ntimeout = 0\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".gitdiffloc.toml").write_text('output = "json"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDIFFLOC_FORMAT", "json")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "json"

    def test_timeout_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDIFFLOC_TIMEOUT", "15")
        cfg = load_config(tmp_path)
        assert cfg.git.timeout == 15

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITDIFFLOC_FORMAT", "xml")
        monkeypatch.setenv("GITDIFFLOC_TIMEOUT", "soon")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.git.timeout == 60

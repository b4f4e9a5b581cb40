"""Tests for generator configuration."""

import pytest

from blockcode import ConfigError, GeneratorConfig, load_config
from blockcode.config import CONFIG_ENV_VAR, config_from_env


class TestLoadConfig:
    def test_yaml(self, tmp_path):
        """Settings are read from a YAML mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("indent_width: 2\njava_inline_utilities: true\n")
        config = load_config(path)
        assert config.indent == "  "
        assert config.java_inline_utilities is True

    def test_empty_file_means_defaults(self, tmp_path):
        """An empty config file yields the default settings."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == GeneratorConfig()

    def test_zero_indent_rejected(self, tmp_path):
        """Indent width must be at least one."""
        path = tmp_path / "config.yaml"
        path.write_text("indent_width: 0\n")
        with pytest.raises(ConfigError, match="invalid config"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path):
        """Unknown settings are rejected rather than ignored."""
        path = tmp_path / "config.yaml"
        path.write_text("tabs: true\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        """A config document must be a mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("- 4\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        """A missing config file raises ConfigError."""
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(tmp_path / "nope.yaml")


class TestConfigFromEnv:
    def test_unset(self, monkeypatch):
        """Without the environment variable the defaults apply."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert config_from_env() == GeneratorConfig()

    def test_set(self, monkeypatch, tmp_path):
        """The environment variable names the config file."""
        path = tmp_path / "config.yaml"
        path.write_text("indent_width: 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert config_from_env().indent_width == 3

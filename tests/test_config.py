"""
Tests for the config loader — python-plugin.yml and PYPLUGIN_* overrides.
"""

from pathlib import Path

import pytest

from python_plugin.core.config.loader import (
    DEFAULT_RELEASES_URL,
    DEFAULT_TAGS_URL,
    PLUGIN_CONFIG_FILE,
    ConfigError,
    PluginConfig,
    find_config_file,
    load_config,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaults:
    def test_no_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.releases_url == DEFAULT_RELEASES_URL
        assert config.tags_url == DEFAULT_TAGS_URL
        assert config.cache_ttl == 86400
        assert config.request_timeout == 30

    def test_cache_path_expands_home(self):
        config = PluginConfig(cache_dir="~/cache")
        assert config.cache_path == Path.home() / "cache"

    def test_empty_file(self, tmp_path):
        config = load_config(_write(tmp_path / PLUGIN_CONFIG_FILE, ""))
        assert config == PluginConfig()


class TestFileValues:
    def test_reads_values(self, tmp_path):
        path = _write(
            tmp_path / PLUGIN_CONFIG_FILE,
            "releases_url: https://mirror.example.com/releases.json\n"
            "cache_ttl: 60\n",
        )
        config = load_config(path)
        assert config.releases_url == "https://mirror.example.com/releases.json"
        assert config.cache_ttl == 60
        assert config.tags_url == DEFAULT_TAGS_URL

    def test_found_from_subdirectory(self, tmp_path, monkeypatch):
        _write(tmp_path / PLUGIN_CONFIG_FILE, "request_timeout: 5\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == (tmp_path / PLUGIN_CONFIG_FILE).resolve()

        monkeypatch.chdir(nested)
        assert load_config().request_timeout == 5


class TestEnvOverrides:
    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = _write(tmp_path / PLUGIN_CONFIG_FILE, "cache_ttl: 60\n")
        monkeypatch.setenv("PYPLUGIN_CACHE_TTL", "0")
        monkeypatch.setenv("PYPLUGIN_TAGS_URL", "https://git.example.com/cpython")
        config = load_config(path)
        assert config.cache_ttl == 0
        assert config.tags_url == "https://git.example.com/cpython"

    def test_invalid_env_value(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PYPLUGIN_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ConfigError, match="Invalid plugin configuration"):
            load_config()


class TestErrors:
    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path / PLUGIN_CONFIG_FILE, "cache_ttl: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = _write(tmp_path / PLUGIN_CONFIG_FILE, "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_negative_ttl(self, tmp_path):
        path = _write(tmp_path / PLUGIN_CONFIG_FILE, "cache_ttl: -1\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_zero_timeout(self, tmp_path):
        path = _write(tmp_path / PLUGIN_CONFIG_FILE, "request_timeout: 0\n")
        with pytest.raises(ConfigError):
            load_config(path)

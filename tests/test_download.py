"""
Tests for the release artifact resolver.
"""

import pytest

from python_plugin.adapters.mock import MockHost
from python_plugin.core.config.loader import DEFAULT_RELEASES_URL, PluginConfig
from python_plugin.core.errors import (
    HostError,
    NoPrebuiltError,
    PluginError,
    UnsupportedTargetError,
)
from python_plugin.core.services.download import download_prebuilt, parse_release_index

INDEX = {
    "3.11.4": {
        "linux-x86_64": {
            "download": "https://example.com/cpython-3.11.4-linux.tar.gz",
            "checksum": "https://example.com/cpython-3.11.4-linux.tar.gz.sha256",
        },
        "x86_64-apple-darwin": {
            "download": "https://example.com/cpython-3.11.4-macos.tar.gz",
        },
    },
    "3.10.12": {
        "linux-x86_64": {"download": "https://example.com/cpython-3.10.12-linux.tar.gz"},
    },
}


@pytest.fixture
def host() -> MockHost:
    h = MockHost(triple="linux-x86_64")
    h.set_json(DEFAULT_RELEASES_URL, INDEX)
    return h


class TestDownloadPrebuilt:
    def test_resolves_entry(self, host):
        result = download_prebuilt("3.11.4", host)
        assert result.download_url == "https://example.com/cpython-3.11.4-linux.tar.gz"
        assert result.checksum_url == "https://example.com/cpython-3.11.4-linux.tar.gz.sha256"
        assert result.archive_prefix == "python"

    def test_missing_checksum(self, host):
        result = download_prebuilt("3.10.12", host)
        assert result.checksum_url is None
        assert result.download_url.endswith("3.10.12-linux.tar.gz")

    def test_unknown_version(self, host):
        with pytest.raises(NoPrebuiltError, match="9.9.9") as exc:
            download_prebuilt("9.9.9", host)
        assert exc.value.key == "9.9.9"
        assert str(exc.value) == "No pre-built available for version 9.9.9!"

    def test_version_miss_does_not_resolve_triple(self, host):
        with pytest.raises(NoPrebuiltError):
            download_prebuilt("9.9.9", host)
        assert host.calls("get_target_triple") == []

    def test_unknown_triple(self):
        host = MockHost(triple="sparc-sun-solaris")
        host.set_json(DEFAULT_RELEASES_URL, INDEX)
        with pytest.raises(NoPrebuiltError, match="sparc-sun-solaris") as exc:
            download_prebuilt("3.11.4", host)
        assert exc.value.key == "sparc-sun-solaris"
        assert "architecture" in str(exc.value)

    def test_unsupported_target(self):
        host = MockHost(triple=None)
        host.set_json(DEFAULT_RELEASES_URL, INDEX)
        with pytest.raises(UnsupportedTargetError):
            download_prebuilt("3.11.4", host)

    def test_uses_configured_index(self):
        url = "https://mirror.example.com/releases.json"
        host = MockHost(triple="linux-x86_64")
        host.set_json(url, INDEX)
        download_prebuilt("3.11.4", host, PluginConfig(releases_url=url))
        assert host.calls("fetch_json_with_cache") == [url]

    def test_fetch_failure_propagates(self):
        host = MockHost(triple="linux-x86_64")
        with pytest.raises(HostError):
            download_prebuilt("3.11.4", host)

    def test_version_key_must_match_exactly(self, host):
        with pytest.raises(NoPrebuiltError):
            download_prebuilt("3.11", host)


class TestParseReleaseIndex:
    def test_valid(self):
        index = parse_release_index(INDEX)
        assert sorted(index.versions()) == ["3.10.12", "3.11.4"]

    def test_entry_without_download(self):
        with pytest.raises(PluginError) as exc:
            parse_release_index({"3.11.4": {"linux-x86_64": {"checksum": "x"}}})
        assert not isinstance(exc.value, NoPrebuiltError)

    def test_not_a_mapping(self):
        with pytest.raises(PluginError, match="Malformed release index"):
            parse_release_index(["3.11.4"])

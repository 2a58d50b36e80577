"""
Tests for the operation dispatcher — JSON in, JSON-ready dict out.
"""

import pytest

from python_plugin import __version__
from python_plugin.core.config.loader import DEFAULT_RELEASES_URL, DEFAULT_TAGS_URL, PluginConfig
from python_plugin.core.errors import NoPrebuiltError, PluginError
from python_plugin.core.plugin import OPERATIONS, call_operation, list_operations, register_tool

INDEX = {
    "3.12.1": {
        "x86_64-unknown-linux-gnu": {
            "download": "https://example.com/cpython-3.12.1.tar.gz",
            "checksum": "https://example.com/cpython-3.12.1.tar.gz.sha256",
        }
    }
}


@pytest.fixture
def host(mock_host):
    mock_host.set_json(DEFAULT_RELEASES_URL, INDEX)
    mock_host.set_tags(DEFAULT_TAGS_URL, ["legacy-trunk", "v3.11.4", "v3.11.4^{}", "v3.12.1", "v3.13.0a1"])
    return mock_host


class TestRegistry:
    def test_all_operations_registered(self):
        assert set(list_operations()) == {
            "register_tool",
            "download_prebuilt",
            "locate_bins",
            "load_versions",
            "detect_version_files",
            "create_shims",
            "install_global",
            "uninstall_global",
        }
        assert all(op.name == key for key, op in OPERATIONS.items())

    def test_register_tool(self):
        meta = register_tool()
        assert meta.name == "Python"
        assert meta.plugin_version == __version__


class TestCallOperation:
    def test_register_tool(self, host):
        assert call_operation("register_tool", None, host) == {
            "name": "Python",
            "type": "language",
            "plugin_version": __version__,
        }

    def test_download_prebuilt(self, host):
        out = call_operation("download_prebuilt", {"context": {"version": "3.12.1"}}, host)
        assert out == {
            "archive_prefix": "python",
            "checksum_url": "https://example.com/cpython-3.12.1.tar.gz.sha256",
            "checksum_name": None,
            "download_url": "https://example.com/cpython-3.12.1.tar.gz",
            "download_name": None,
        }

    def test_download_prebuilt_missing_version(self, host):
        with pytest.raises(NoPrebuiltError, match="version 2.7.18"):
            call_operation("download_prebuilt", {"context": {"version": "2.7.18"}}, host)

    def test_locate_bins(self, host, tool_dir):
        out = call_operation("locate_bins", {"context": {"tool_dir": str(tool_dir)}}, host)
        assert out["bin_path"] == str(tool_dir / "install/bin/python3")
        assert out["globals_lookup_dirs"] == ["$HOME/.local/bin"]
        assert out["fallback_last_globals_dir"] is True

    def test_load_versions(self, host):
        out = call_operation("load_versions", {}, host)
        assert out["versions"] == ["3.11.4", "3.12.1", "3.13.0-alpha.1"]
        assert out["latest"] == "3.12.1"
        assert out["aliases"] == {"latest": "3.12.1"}

    def test_detect_version_files(self, host):
        assert call_operation("detect_version_files", None, host) == {"files": [".python-version"]}

    def test_create_shims(self, host):
        out = call_operation("create_shims", None, host)
        assert out["global_shims"]["pip"]["before_args"] == "-m pip"
        assert out["local_shims"] == {}

    def test_install_global(self, host):
        host.set_exec_result("pip", exit_code=0, stdout="Successfully installed black\n")
        out = call_operation("install_global", {"dependency": "black"}, host)
        assert out == {"exit_code": 0, "stdout": "Successfully installed black\n", "stderr": ""}
        assert host.calls("exec_command")[0].args == ["install", "--user", "black"]

    def test_uninstall_global(self, host):
        call_operation("uninstall_global", {"dependency": "black"}, host)
        assert host.calls("exec_command")[0].args == ["uninstall", "--yes", "black"]

    def test_custom_config(self, host):
        host.set_json("https://mirror.example.com/releases.json", {})
        config = PluginConfig(releases_url="https://mirror.example.com/releases.json")
        with pytest.raises(NoPrebuiltError):
            call_operation("download_prebuilt", {"context": {"version": "3.12.1"}}, host, config)


class TestCallErrors:
    def test_unknown_operation(self, host):
        with pytest.raises(PluginError, match="Unknown operation 'sync_manifest'"):
            call_operation("sync_manifest", {}, host)

    def test_invalid_payload(self, host):
        with pytest.raises(PluginError, match="Invalid input for install_global"):
            call_operation("install_global", {"package": "black"}, host)

    def test_missing_payload(self, host):
        with pytest.raises(PluginError, match="Invalid input for download_prebuilt"):
            call_operation("download_prebuilt", None, host)

    def test_no_host_calls_on_bad_input(self, host):
        with pytest.raises(PluginError):
            call_operation("locate_bins", {"context": "nope"}, host)
        assert host.call_count == 0

    @pytest.mark.parametrize(
        "name, payload",
        [
            ("download_prebuilt", {"context": {}}),
            ("download_prebuilt", {"context": {"version": ""}}),
            ("locate_bins", {"context": {}}),
            ("locate_bins", {"context": {"tool_dir": ""}}),
        ],
    )
    def test_empty_context_rejected(self, host, name, payload):
        with pytest.raises(PluginError, match=f"Invalid input for {name}"):
            call_operation(name, payload, host)
        assert host.call_count == 0

    def test_extra_context_keys_ignored(self, host, tool_dir):
        context = {"version": "3.12.1", "tool_dir": str(tool_dir)}
        out = call_operation("locate_bins", {"context": context}, host)
        assert out["bin_path"] == str(tool_dir / "install/bin/python3")

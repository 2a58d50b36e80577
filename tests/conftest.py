"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

from python_plugin.adapters.mock import MockHost
from python_plugin.core.models.environment import HostArch, HostEnvironment, HostOS


@pytest.fixture
def mock_host() -> MockHost:
    """A linux/x64 host with no canned data."""
    return MockHost()


@pytest.fixture
def windows_host() -> MockHost:
    """A windows/x64 host."""
    return MockHost(
        env=HostEnvironment(os=HostOS.WINDOWS, arch=HostArch.X64, home_dir="C:/Users/mock"),
        triple="x86_64-pc-windows-msvc",
    )


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    """An empty install directory."""
    path = tmp_path / "tools" / "python" / "3.12.1"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_manifest(tool_dir: Path):
    """Write PYTHON.json into ``tool_dir`` from a dict or raw string."""

    def _write(content) -> Path:
        path = tool_dir / "PYTHON.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_plugin_env(monkeypatch):
    """Keep PYPLUGIN_* variables from the outer shell out of tests."""
    for var in (
        "PYPLUGIN_RELEASES_URL",
        "PYPLUGIN_TAGS_URL",
        "PYPLUGIN_CACHE_DIR",
        "PYPLUGIN_CACHE_TTL",
        "PYPLUGIN_REQUEST_TIMEOUT",
        "PYPLUGIN_LOG_LEVEL",
        "PYPLUGIN_LOG_FILE",
        "PYPLUGIN_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

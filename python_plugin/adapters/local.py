"""
Local host — runs the plugin's primitives against this machine.

Environment facts come from ``platform``, JSON over ``urllib``, tags
from the git CLI (``git ls-remote``), and processes from ``subprocess``.
"""

from __future__ import annotations

import json
import logging
import os
import platform
import shutil
import subprocess
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any

from python_plugin import __version__
from python_plugin.adapters.base import Host
from python_plugin.adapters.cache import FetchCache
from python_plugin.core.config.loader import PluginConfig
from python_plugin.core.errors import HostError, UnsupportedTargetError
from python_plugin.core.models.environment import HostArch, HostEnvironment, HostOS
from python_plugin.core.models.process import ExecCommandInput, ExecCommandOutput

logger = logging.getLogger(__name__)

_OS_MAP: dict[str, HostOS] = {
    "linux": HostOS.LINUX,
    "darwin": HostOS.MACOS,
    "windows": HostOS.WINDOWS,
    "freebsd": HostOS.FREEBSD,
    "netbsd": HostOS.NETBSD,
    "openbsd": HostOS.OPENBSD,
}

_ARCH_MAP: dict[str, HostArch] = {
    "x86_64": HostArch.X64,
    "amd64": HostArch.X64,
    "aarch64": HostArch.ARM64,
    "arm64": HostArch.ARM64,
    "i386": HostArch.X86,
    "i686": HostArch.X86,
    "x86": HostArch.X86,
    "armv7l": HostArch.ARM,
    "armv6l": HostArch.ARM,
    "ppc64le": HostArch.POWERPC64,
    "s390x": HostArch.S390X,
}

# Rust-style target triples, as used by python-build-standalone releases
_TRIPLE_ARCH: dict[HostArch, str] = {
    HostArch.X64: "x86_64",
    HostArch.ARM64: "aarch64",
    HostArch.X86: "i686",
}

_TRIPLE_OS: dict[HostOS, str] = {
    HostOS.LINUX: "unknown-linux-gnu",
    HostOS.MACOS: "apple-darwin",
    HostOS.WINDOWS: "pc-windows-msvc",
}

_TAG_PREFIX = "refs/tags/"


def detect_environment() -> HostEnvironment:
    """Describe the running machine.

    Raises:
        UnsupportedTargetError: If the OS or architecture is unknown.
    """
    system = platform.system().lower()
    machine = platform.machine().lower()

    host_os = _OS_MAP.get(system)
    if host_os is None:
        raise UnsupportedTargetError(f"Unsupported operating system: {platform.system()}")

    arch = _ARCH_MAP.get(machine)
    if arch is None:
        raise UnsupportedTargetError(f"Unsupported architecture: {platform.machine()}")

    return HostEnvironment(os=host_os, arch=arch, home_dir=str(Path.home()))


def target_triple(env: HostEnvironment, tool_name: str) -> str:
    """``x64`` + ``linux`` -> ``x86_64-unknown-linux-gnu`` and so on.

    Raises:
        UnsupportedTargetError: If either half has no triple spelling.
    """
    arch = _TRIPLE_ARCH.get(env.arch)
    suffix = _TRIPLE_OS.get(env.os)
    if arch is None or suffix is None:
        raise UnsupportedTargetError(
            f"Unsupported {tool_name} target: {env.os}/{env.arch}"
        )
    return f"{arch}-{suffix}"


def parse_ls_remote(output: str) -> list[str]:
    """Extract tag names from ``git ls-remote --tags`` output.

    Each line is ``<sha>\\t<ref>``; only ``refs/tags/*`` refs are kept.
    """
    tags: list[str] = []
    for line in output.splitlines():
        parts = line.strip().split("\t", 1)
        if len(parts) != 2:
            continue
        ref = parts[1].strip()
        if ref.startswith(_TAG_PREFIX):
            tags.append(ref[len(_TAG_PREFIX):])
    return tags


class LocalHost(Host):
    """Host backed by this machine's platform, network and processes."""

    def __init__(self, config: PluginConfig | None = None):
        self.config = config or PluginConfig()
        self.cache = FetchCache(self.config.cache_path, self.config.cache_ttl)

    @property
    def name(self) -> str:
        return "local"

    def environment(self) -> HostEnvironment:
        return detect_environment()

    def get_target_triple(self, env: HostEnvironment, tool_name: str) -> str:
        return target_triple(env, tool_name)

    def fetch_json_with_cache(self, url: str) -> Any:
        cached = self.cache.get(url)
        if cached is not None:
            return cached

        logger.info("Fetching %s", url)
        req = urllib.request.Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": f"python-plugin/{__version__}",
            },
        )
        try:
            with urllib.request.urlopen(req, timeout=self.config.request_timeout) as resp:
                data = json.loads(resp.read())
        except urllib.error.HTTPError as e:
            raise HostError(f"Failed to fetch {url}: HTTP {e.code}") from e
        except (urllib.error.URLError, TimeoutError) as e:
            raise HostError(f"Failed to fetch {url}: {e}") from e
        except json.JSONDecodeError as e:
            raise HostError(f"Invalid JSON from {url}: {e}") from e

        self.cache.put(url, data)
        return data

    def load_git_tags(self, url: str) -> list[str]:
        if shutil.which("git") is None:
            raise HostError("git is required to list tags but was not found on PATH")

        cmd = ["git", "ls-remote", "--tags", "--sort", "version:refname", url]
        logger.info("Listing tags of %s", url)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.config.request_timeout * 4,
            )
        except subprocess.TimeoutExpired as e:
            raise HostError(f"Timed out listing tags of {url}") from e

        if result.returncode != 0:
            raise HostError(
                f"git ls-remote failed for {url}: "
                f"{result.stderr.strip() or f'exit code {result.returncode}'}"
            )

        tags = parse_ls_remote(result.stdout)
        logger.debug("Found %d tags at %s", len(tags), url)
        return tags

    def exec_command(self, command: ExecCommandInput) -> ExecCommandOutput:
        env = {**os.environ, **command.env}
        logger.debug("Executing: %s", " ".join(command.argv))

        try:
            if command.stream:
                result = subprocess.run(command.argv, env=env)
                return ExecCommandOutput(command=command.command, exit_code=result.returncode)

            result = subprocess.run(command.argv, env=env, capture_output=True, text=True)
        except OSError as e:
            raise HostError(f"Failed to run {command.command}: {e}") from e

        return ExecCommandOutput(
            command=command.command,
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

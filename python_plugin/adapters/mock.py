"""
Mock host — universal test double for every host primitive.

Serves canned environment facts, JSON documents, tag lists and process
results without touching the machine. Records every primitive call.
"""

from __future__ import annotations

from typing import Any

from python_plugin.adapters.base import Host
from python_plugin.core.errors import HostError, UnsupportedTargetError
from python_plugin.core.models.environment import HostArch, HostEnvironment, HostOS
from python_plugin.core.models.process import ExecCommandInput, ExecCommandOutput


class MockHost(Host):
    """Configurable in-memory host.

    By default reports linux/x64 with triple ``x86_64-unknown-linux-gnu``
    and runs every command successfully with empty output.
    """

    def __init__(
        self,
        env: HostEnvironment | None = None,
        triple: str | None = "x86_64-unknown-linux-gnu",
        host_name: str = "mock",
    ):
        self._name = host_name
        self._env = env or HostEnvironment(os=HostOS.LINUX, arch=HostArch.X64, home_dir="/home/mock")
        self._triple = triple
        self._json: dict[str, Any] = {}
        self._tags: dict[str, list[str]] = {}
        self._exec_results: dict[str, ExecCommandOutput] = {}
        self._failures: dict[str, str] = {}
        self._call_log: list[tuple[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, Any]]:
        """``(primitive, argument)`` pairs in call order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls(self, primitive: str) -> list[Any]:
        """Arguments of every call made to one primitive."""
        return [arg for name, arg in self._call_log if name == primitive]

    # ── Configuration ───────────────────────────────────────────

    def set_json(self, url: str, data: Any) -> None:
        self._json[url] = data

    def set_tags(self, url: str, tags: list[str]) -> None:
        self._tags[url] = list(tags)

    def set_exec_result(
        self,
        command: str,
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self._exec_results[command] = ExecCommandOutput(
            command=command, exit_code=exit_code, stdout=stdout, stderr=stderr
        )

    def set_failure(self, primitive: str, error: str = "Mock failure") -> None:
        """Make a primitive raise ``HostError`` with ``error``."""
        self._failures[primitive] = error

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()

    # ── Primitives ──────────────────────────────────────────────

    def environment(self) -> HostEnvironment:
        self._record("environment", None)
        return self._env

    def get_target_triple(self, env: HostEnvironment, tool_name: str) -> str:
        self._record("get_target_triple", tool_name)
        if self._triple is None:
            raise UnsupportedTargetError(
                f"Unsupported {tool_name} target: {env.os}/{env.arch}"
            )
        return self._triple

    def fetch_json_with_cache(self, url: str) -> Any:
        self._record("fetch_json_with_cache", url)
        if url not in self._json:
            raise HostError(f"Failed to fetch {url}: HTTP 404")
        return self._json[url]

    def load_git_tags(self, url: str) -> list[str]:
        self._record("load_git_tags", url)
        return list(self._tags.get(url, []))

    def exec_command(self, command: ExecCommandInput) -> ExecCommandOutput:
        self._record("exec_command", command)
        result = self._exec_results.get(command.command)
        if result is None:
            return ExecCommandOutput(command=command.command, exit_code=0)
        return result

    def _record(self, primitive: str, arg: Any) -> None:
        self._call_log.append((primitive, arg))
        if primitive in self._failures:
            raise HostError(self._failures[primitive])

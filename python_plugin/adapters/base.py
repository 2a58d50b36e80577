"""
Host base — the capability contract between plugin logic and its host.

Decision functions never touch the network, spawn processes, or probe
the machine directly. They receive a ``Host`` and call its primitives,
so the logic stays pure and every primitive can be swapped for
``MockHost`` in tests.

Unlike action adapters, host primitives DO raise: a failed fetch or a
process that cannot start is a ``HostError`` the operation propagates.
A process that starts and exits non-zero is not a failure here; its
exit code travels back in ``ExecCommandOutput``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from python_plugin.core.models.environment import HostEnvironment
from python_plugin.core.models.process import ExecCommandInput, ExecCommandOutput


class Host(ABC):
    """Abstract base class for plugin hosts.

    To create a new host:
        1. Subclass Host
        2. Implement the five primitives below
        3. Pass the instance to the operation functions
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The host identifier (e.g., 'local', 'mock')."""

    @abstractmethod
    def environment(self) -> HostEnvironment:
        """Report the OS and architecture operations run for."""

    @abstractmethod
    def get_target_triple(self, env: HostEnvironment, tool_name: str) -> str:
        """Map ``env`` to the target triple used as a release-index key.

        Raises:
            UnsupportedTargetError: If the OS/arch pair has no triple.
        """

    @abstractmethod
    def fetch_json_with_cache(self, url: str) -> Any:
        """Fetch and decode a JSON document, caching it as the host sees fit.

        Raises:
            HostError: On network, HTTP, or decoding failure.
        """

    @abstractmethod
    def load_git_tags(self, url: str) -> list[str]:
        """List tag names of a remote git repository.

        Names come back without the ``refs/tags/`` prefix. Dereferenced
        annotated tags keep their ``^{}`` suffix.

        Raises:
            HostError: If the tags cannot be listed.
        """

    @abstractmethod
    def exec_command(self, command: ExecCommandInput) -> ExecCommandOutput:
        """Run a process to completion and report its exit status.

        Raises:
            HostError: If the process cannot be started at all.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

"""
Host environment model — the OS/architecture facts a host reports.

The plugin never probes the machine itself; a host adapter builds a
``HostEnvironment`` and hands it to the decision functions.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class HostOS(StrEnum):
    """Operating system families a host can report."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"


class HostArch(StrEnum):
    """CPU architectures a host can report."""

    X86 = "x86"
    X64 = "x64"
    ARM = "arm"
    ARM64 = "arm64"
    POWERPC64 = "powerpc64"
    S390X = "s390x"


class HostEnvironment(BaseModel):
    """Snapshot of the machine an operation runs for."""

    os: HostOS
    arch: HostArch
    home_dir: str = ""

    @property
    def is_windows(self) -> bool:
        return self.os == HostOS.WINDOWS

    def format_bin_name(self, name: str) -> str:
        """Apply the OS executable naming rule (``.exe`` on Windows)."""
        if self.is_windows:
            return f"{name}.exe"
        return name

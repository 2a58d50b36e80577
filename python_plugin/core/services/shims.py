"""
Shims and global packages — pip as a first-class command.

Installs do not always ship a standalone ``pip`` executable, so the
``pip`` shim runs ``python -m pip``. Global installs go through the same
front-end with user scope.
"""

from __future__ import annotations

import logging

from python_plugin.adapters.base import Host
from python_plugin.core.models.environment import HostOS
from python_plugin.core.models.process import (
    ExecCommandInput,
    InstallGlobalOutput,
    UninstallGlobalOutput,
)
from python_plugin.core.models.shim import CreateShimsOutput, ShimConfig

logger = logging.getLogger(__name__)

PRIMARY_BIN = "python"
PIP = "pip"


def create_shims() -> CreateShimsOutput:
    """The global shims every Python install gets."""
    return CreateShimsOutput(
        global_shims={PIP: ShimConfig.global_with_sub_command(f"-m {PIP}")},
    )


def install_global(dependency: str, host: Host) -> InstallGlobalOutput:
    """``pip install --user <dependency>``; exit status passes through."""
    result = host.exec_command(
        ExecCommandInput(command=PIP, args=["install", "--user", dependency], stream=True)
    )
    logger.info("pip install %s exited with %d", dependency, result.exit_code)
    return InstallGlobalOutput.from_exec_command(result)


def uninstall_global(dependency: str, host: Host) -> UninstallGlobalOutput:
    """``pip uninstall --yes <dependency>``; exit status passes through."""
    result = host.exec_command(
        ExecCommandInput(command=PIP, args=["uninstall", "--yes", dependency], stream=True)
    )
    logger.info("pip uninstall %s exited with %d", dependency, result.exit_code)
    return UninstallGlobalOutput.from_exec_command(result)


# ── Launcher scripts ────────────────────────────────────────────


def render_shim(name: str, shim: ShimConfig, host_os: HostOS) -> str:
    """Render the launcher script text for a global shim.

    A shim with ``bin_path`` runs that binary (through ``parent_bin`` if
    set); otherwise it runs the primary ``python`` binary. ``before_args``
    and ``after_args`` wrap the user's arguments.

    Returns:
        A ``.cmd`` batch file on Windows, a POSIX ``sh`` script elsewhere.
    """
    target = shim.bin_path or PRIMARY_BIN
    parts = [shim.parent_bin, target, shim.before_args]

    if host_os == HostOS.WINDOWS:
        command = " ".join(p for p in [*parts, "%*", shim.after_args] if p)
        return f"@echo off\r\nrem {name} shim\r\n{command}\r\n"

    command = " ".join(p for p in [*parts, '"$@"', shim.after_args] if p)
    return f"#!/bin/sh\n# {name} shim\nexec {command}\n"

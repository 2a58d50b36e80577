"""
Process models — what a host runs, what it reports back.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ExecCommandInput(BaseModel):
    """A process for the host to spawn.

    With ``stream`` set the child inherits the caller's stdio, so
    ``stdout``/``stderr`` come back empty.
    """

    command: str
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    stream: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


class ExecCommandOutput(BaseModel):
    """Exit status and captured output of a finished process."""

    command: str = ""
    exit_code: int
    stdout: str = ""
    stderr: str = ""


class GlobalPackageInput(BaseModel):
    """A package name to install or uninstall user-wide."""

    dependency: str


class _GlobalPackageOutput(BaseModel):
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def from_exec_command(cls, result: ExecCommandOutput):
        return cls(
            exit_code=result.exit_code,
            stdout=result.stdout,
            stderr=result.stderr,
        )


class InstallGlobalOutput(_GlobalPackageOutput):
    """Pass-through of the package manager's install run."""


class UninstallGlobalOutput(_GlobalPackageOutput):
    """Pass-through of the package manager's uninstall run."""

"""
Shim models — launcher descriptors the host turns into scripts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ShimConfig(BaseModel):
    """How a shim forwards to a real executable.

    ``bin_path`` points at an alternate binary inside the install;
    ``parent_bin`` names another tool that runs it; ``before_args`` and
    ``after_args`` wrap the user's own arguments.
    """

    bin_path: str | None = None
    parent_bin: str | None = None
    before_args: str | None = None
    after_args: str | None = None

    @classmethod
    def global_with_alt_bin(cls, bin_path: str) -> ShimConfig:
        return cls(bin_path=bin_path)

    @classmethod
    def global_with_sub_command(cls, sub_command: str) -> ShimConfig:
        """Shim that runs the primary binary with a fixed sub-command."""
        return cls(before_args=sub_command)

    @classmethod
    def local_with_parent(cls, bin_path: str, parent: str) -> ShimConfig:
        return cls(bin_path=bin_path, parent_bin=parent)


class CreateShimsOutput(BaseModel):
    """Shims to create, keyed by the command name they answer to."""

    global_shims: dict[str, ShimConfig] = Field(default_factory=dict)
    local_shims: dict[str, ShimConfig] = Field(default_factory=dict)
    no_primary_global: bool = False

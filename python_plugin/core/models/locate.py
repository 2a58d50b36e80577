"""
Install layout models — the installer manifest and locate results.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PythonManifest(BaseModel):
    """``PYTHON.json`` written next to a pre-built install.

    The installer records many more keys; only these two are read.
    """

    python_exe: str
    python_major_minor_version: str

    @property
    def compact_version(self) -> str:
        """``"3.11"`` -> ``"311"``, as used in Windows script directories."""
        return self.python_major_minor_version.replace(".", "")


class LocateContext(BaseModel):
    tool_dir: str = Field(min_length=1)


class LocateBinsInput(BaseModel):
    """Where the host unpacked the tool, in ``context.tool_dir``."""

    context: LocateContext


class LocateBinsOutput(BaseModel):
    """Executable path and global-package directories, in priority order."""

    bin_path: str
    globals_lookup_dirs: list[str] = Field(default_factory=list)
    fallback_last_globals_dir: bool = False

"""
Binary locator — where an installed Python and its global scripts live.

Pre-built installs carry a ``PYTHON.json`` manifest naming the real
interpreter; source builds do not, and fall back to a fixed layout.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from python_plugin.adapters.base import Host
from python_plugin.core.errors import ManifestError
from python_plugin.core.models.environment import HostEnvironment
from python_plugin.core.models.locate import LocateBinsOutput, PythonManifest

logger = logging.getLogger(__name__)

MANIFEST_FILE = "PYTHON.json"
DEFAULT_BIN = "install/bin/python3"
DEFAULT_GLOBALS_DIR = "$HOME/.local/bin"

# Windows ``pip install --user`` script dirs; {version} is "311" for 3.11.
# Checked in this order.
WINDOWS_GLOBALS_DIRS = (
    "$APPDATA/Roaming/Python{version}/Scripts",
    "$APPDATA/Python{version}/Scripts",
)


def read_manifest(tool_dir: Path) -> PythonManifest | None:
    """Load the installer manifest from ``tool_dir``.

    Returns:
        The manifest, or None when the install has none.

    Raises:
        ManifestError: If the file exists but cannot be read or validated.
    """
    path = tool_dir / MANIFEST_FILE
    if not path.exists():
        return None

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}", path=path) from e

    try:
        return PythonManifest.model_validate_json(raw)
    except ValidationError as e:
        raise ManifestError(f"Invalid install manifest {path}: {e}", path=path) from e


def globals_lookup_dirs(env: HostEnvironment, manifest: PythonManifest | None) -> list[str]:
    """Global-package directories in priority order."""
    dirs = [DEFAULT_GLOBALS_DIR]
    if manifest is not None and env.is_windows:
        dirs.extend(d.format(version=manifest.compact_version) for d in WINDOWS_GLOBALS_DIRS)
    return dirs


def locate_bins(tool_dir: Path | str, host: Host) -> LocateBinsOutput:
    """Find the interpreter and global-package dirs of an install.

    Raises:
        ManifestError: If the install manifest is present but invalid.
    """
    tool_dir = Path(tool_dir)
    env = host.environment()
    manifest = read_manifest(tool_dir)

    if manifest is None:
        bin_path = str(tool_dir / env.format_bin_name(DEFAULT_BIN))
        logger.debug("No %s in %s, using %s", MANIFEST_FILE, tool_dir, bin_path)
    else:
        bin_path = manifest.python_exe
        logger.debug("Manifest points at %s (Python %s)", bin_path, manifest.python_major_minor_version)

    return LocateBinsOutput(
        bin_path=bin_path,
        globals_lookup_dirs=globals_lookup_dirs(env, manifest),
        fallback_last_globals_dir=True,
    )

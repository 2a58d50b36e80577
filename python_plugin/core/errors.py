"""
Plugin errors — the failures a host is expected to report.

Two kinds matter to callers: a lookup-miss against the release index
(``NoPrebuiltError``) and an install manifest that exists but cannot be
read (``ManifestError``). Everything a host primitive raises is wrapped
in ``HostError`` and propagated.
"""

from __future__ import annotations

from pathlib import Path


class PluginError(Exception):
    """Base class for every error raised by plugin operations."""


class NoPrebuiltError(PluginError):
    """The release index has no artifact for a version or a target triple."""

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class ManifestError(PluginError):
    """An install manifest is present but unreadable or invalid."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class UnsupportedTargetError(PluginError):
    """The host OS/architecture pair has no known target triple."""


class HostError(PluginError):
    """A host primitive (fetch, git, process spawn) failed."""

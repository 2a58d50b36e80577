"""
Release index models — pre-built artifacts keyed by version then triple.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, RootModel


class ReleaseEntry(BaseModel):
    """One downloadable artifact. ``checksum`` is absent for unverified builds."""

    download: str
    checksum: str | None = None


class ReleaseIndex(RootModel[dict[str, dict[str, ReleaseEntry]]]):
    """``version -> target triple -> ReleaseEntry`` snapshot."""

    def get_version(self, version: str) -> dict[str, ReleaseEntry] | None:
        return self.root.get(version)

    def versions(self) -> list[str]:
        return list(self.root.keys())


class DownloadContext(BaseModel):
    version: str = Field(min_length=1)


class DownloadPrebuiltInput(BaseModel):
    """The version the host wants to install, in ``context.version``."""

    context: DownloadContext


class DownloadPrebuiltOutput(BaseModel):
    """Everything the host needs to fetch and unpack a pre-built."""

    archive_prefix: str | None = None
    checksum_url: str | None = None
    checksum_name: str | None = None
    download_url: str
    download_name: str | None = None

"""
Tool-level outputs — metadata, available versions, version files.
"""

from __future__ import annotations

import logging
from enum import StrEnum

import semantic_version
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class PluginType(StrEnum):
    """What kind of tool a plugin manages."""

    LANGUAGE = "language"
    DEPENDENCY_MANAGER = "dependency-manager"
    CLI = "cli"


class ToolMetadataOutput(BaseModel):
    """Identity of the tool, reported when the host registers the plugin."""

    name: str
    type: PluginType
    plugin_version: str | None = None


class LoadVersionsOutput(BaseModel):
    """Installable versions plus the aliases derived from them.

    ``versions`` keeps the order it was built from; ``latest`` is the
    highest stable (non-prerelease) version.
    """

    versions: list[str] = Field(default_factory=list)
    latest: str | None = None
    aliases: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_versions(cls, values: list[str]) -> LoadVersionsOutput:
        """Build the output from normalized version strings.

        Raises:
            ValueError: If any value is not a valid semantic version.
        """
        parsed = [semantic_version.Version(value) for value in values]

        stable = [v for v in parsed if not v.prerelease and not v.build]
        latest = str(max(stable)) if stable else None

        output = cls(versions=[str(v) for v in parsed], latest=latest)
        if latest is not None:
            output.aliases["latest"] = latest
        logger.debug("Loaded %d versions (latest: %s)", len(parsed), latest)
        return output


class DetectVersionOutput(BaseModel):
    """File names that pin a project's tool version."""

    files: list[str] = Field(default_factory=list)

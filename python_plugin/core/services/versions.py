"""
Version tag normalizer — CPython git tags to installable versions.

CPython tags look like ``v3.11.4``, ``v2.7`` or ``v3.12.0rc2``. They are
mapped to semantic versions (``3.11.4``, ``2.7.0``, ``3.12.0-rc.2``).
The tag list is noisy by nature, so anything that does not map is
dropped without error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

import semantic_version

from python_plugin.adapters.base import Host
from python_plugin.core.config.loader import PluginConfig
from python_plugin.core.models.tool import LoadVersionsOutput

logger = logging.getLogger(__name__)

DEREF_SUFFIX = "^{}"
LEGACY_TAG = "legacy-trunk"

_TAG_RE = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    r"(?:(?P<pre>a|b|c|rc)(?P<pre_num>\d+))?$"
)

# CPython pre-release letters -> semver pre-release labels
_PRE_LABELS: dict[str, str] = {
    "a": "alpha",
    "b": "beta",
    "c": "rc",
    "rc": "rc",
}


def is_candidate_tag(tag: str) -> bool:
    """False for git's dereferenced-tag pointers and the legacy branch tag."""
    return not tag.endswith(DEREF_SUFFIX) and tag != LEGACY_TAG


def from_python_version(tag: str) -> str | None:
    """Convert a CPython tag to a semantic version string, or None."""
    match = _TAG_RE.match(tag.strip())
    if match is None:
        return None

    version = f"{int(match['major'])}.{int(match['minor'])}.{int(match['patch'] or 0)}"
    if match["pre"]:
        version += f"-{_PRE_LABELS[match['pre']]}.{int(match['pre_num'])}"

    try:
        semantic_version.Version(version)
    except ValueError:
        return None
    return version


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Filter and convert raw tags, keeping input order."""
    versions: list[str] = []
    for tag in tags:
        if not is_candidate_tag(tag):
            continue
        version = from_python_version(tag)
        if version is None:
            logger.debug("Dropping tag %r", tag)
            continue
        versions.append(version)
    return versions


def load_versions(host: Host, config: PluginConfig | None = None) -> LoadVersionsOutput:
    """List every installable Python version from the CPython repository.

    Raises:
        HostError: If the tags cannot be fetched.
    """
    config = config or PluginConfig()
    tags = host.load_git_tags(config.tags_url)
    versions = normalize_tags(tags)
    logger.info("%d of %d tags are installable versions", len(versions), len(tags))
    return LoadVersionsOutput.from_versions(versions)


def detect_version_files() -> list[str]:
    """Files that pin a project's Python version."""
    return [".python-version"]

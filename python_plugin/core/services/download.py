"""
Release artifact resolver — version + platform to a pre-built download.

The release index is a JSON document mapping each version to the target
triples it was built for. A missing version or triple is a definitive
answer, reported to the caller and never retried.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from python_plugin.adapters.base import Host
from python_plugin.core.config.loader import PluginConfig
from python_plugin.core.errors import NoPrebuiltError, PluginError
from python_plugin.core.models.release import DownloadPrebuiltOutput, ReleaseIndex

logger = logging.getLogger(__name__)

TOOL_NAME = "Python"

# Top-level directory inside every python-build-standalone archive
ARCHIVE_PREFIX = "python"


def parse_release_index(data: Any) -> ReleaseIndex:
    """Validate a fetched release index payload.

    Raises:
        PluginError: If the payload is not ``version -> triple -> entry``.
    """
    try:
        return ReleaseIndex.model_validate(data)
    except ValidationError as e:
        raise PluginError(f"Malformed release index: {e}") from e


def download_prebuilt(
    version: str,
    host: Host,
    config: PluginConfig | None = None,
) -> DownloadPrebuiltOutput:
    """Resolve the pre-built archive for ``version`` on the host platform.

    Args:
        version: Exact version key, e.g. ``"3.11.4"``.
        host: Supplies the index fetch and the target triple.
        config: Where the release index lives.

    Returns:
        Download and checksum URLs, verbatim from the index.

    Raises:
        NoPrebuiltError: If the version, or the host's triple, is missing.
    """
    config = config or PluginConfig()
    index = parse_release_index(host.fetch_json_with_cache(config.releases_url))

    triples = index.get_version(version)
    if triples is None:
        raise NoPrebuiltError(f"No pre-built available for version {version}!", key=version)

    env = host.environment()
    triple = host.get_target_triple(env, TOOL_NAME)

    entry = triples.get(triple)
    if entry is None:
        raise NoPrebuiltError(f"No pre-built available for architecture {triple}!", key=triple)

    logger.info("Resolved Python %s for %s: %s", version, triple, entry.download)
    if entry.checksum is None:
        logger.info("No checksum published for Python %s on %s", version, triple)

    return DownloadPrebuiltOutput(
        archive_prefix=ARCHIVE_PREFIX,
        checksum_url=entry.checksum,
        download_url=entry.download,
    )

"""
On-disk cache for fetched JSON documents.

One file per URL under the cache directory, named by a hash of the URL.
Entries older than the TTL are stale. Writes go to a temp file that is
renamed into place, so a reader never sees a half-written entry.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FetchCache:
    """TTL-bound JSON cache keyed by URL. A TTL of 0 disables it."""

    def __init__(self, cache_dir: Path, ttl: int):
        self.cache_dir = cache_dir
        self.ttl = ttl

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def path_for(self, url: str) -> Path:
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:24]
        return self.cache_dir / f"{digest}.json"

    def get(self, url: str) -> Any | None:
        """Return the cached document for ``url``, or None if absent or stale."""
        if not self.enabled:
            return None

        path = self.path_for(url)
        if not path.is_file():
            return None

        try:
            entry = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.debug("Ignoring unreadable cache entry %s", path)
            return None

        if not isinstance(entry, dict) or entry.get("url") != url:
            return None

        try:
            age = time.time() - float(entry["fetched_at"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Ignoring cache entry %s without a valid timestamp", path)
            return None

        if age >= self.ttl:
            logger.debug("Cache stale for %s (%.0fs old)", url, age)
            return None

        logger.debug("Cache hit for %s", url)
        return entry.get("data")

    def put(self, url: str, data: Any) -> None:
        """Store ``data`` for ``url``."""
        if not self.enabled:
            return

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        entry = {"url": url, "fetched_at": time.time(), "data": data}

        fd, tmp = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entry, f)
            os.replace(tmp, self.path_for(url))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

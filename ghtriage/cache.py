"""Disk cache for API responses: one file per resource URL.

File contents are the raw response body. The file's presence and mtime
are the only metadata; there is no index.

Freshness (``ttl``):
- None or infinite: fresh once written, until cleared.
- > 0: fresh while the file is younger than ttl.
- 0: never fresh; writes still happen so the last body can be inspected.

Cache keys are sanitized URLs, not hashes: URLs that differ only in
characters outside ``[a-z0-9._]`` map to the same file. That is fine for
the API URL shapes used here; pass ``hashed_keys=True`` to make keys
exact.
"""

import hashlib
import logging
import math
import os
import re
import time
from datetime import timedelta
from pathlib import Path

from ghtriage.errors import StorageError

API_PREFIX = "https://api.github.com/"

LOG = logging.getLogger("ghtriage.cache")

_INVALID_KEY_CHARS_RE = re.compile(r"[^a-z0-9._]")

Ttl = timedelta | float | int | None


def _ttl_seconds(ttl: Ttl) -> float | None:
    """Normalize ttl to seconds; None means never expires."""
    if ttl is None:
        return None
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
    if math.isinf(seconds):
        return None
    return seconds


def cache_key(url: str, api_prefix: str = API_PREFIX, hashed: bool = False) -> str:
    """Derive a file name from a resource URL.

    Strips ``api_prefix``, turns "/" into "__" and drops anything outside
    ``[a-z0-9._]``. With ``hashed`` a short digest of the stripped URL is
    appended so keys never collide.
    """
    locator = url[len(api_prefix):] if url.startswith(api_prefix) else url
    key = _INVALID_KEY_CHARS_RE.sub("", locator.replace("/", "__"))
    if hashed:
        digest = hashlib.sha256(locator.encode("utf-8")).hexdigest()[:16]
        key = f"{key}.{digest}"
    return key


class ResourceCache:
    """Directory of cached response bodies keyed by URL."""

    def __init__(
        self,
        directory: Path,
        api_prefix: str = API_PREFIX,
        hashed_keys: bool = False,
    ) -> None:
        self._directory = Path(directory)
        self._api_prefix = api_prefix
        self._hashed_keys = hashed_keys

    @property
    def directory(self) -> Path:
        return self._directory

    def key(self, url: str) -> str:
        return cache_key(url, self._api_prefix, self._hashed_keys)

    def path_for(self, url: str) -> Path:
        """Path of the cache file for ``url``; creates the cache dir if needed."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create cache directory {self._directory}: {e}") from e
        return self._directory / self.key(url)

    def is_fresh(self, url: str, ttl: Ttl = None) -> bool:
        """Whether the stored body for ``url`` can be used without refetching.

        Anything that prevents reading the file's mtime counts as stale.
        """
        path = self.path_for(url)
        seconds = _ttl_seconds(ttl)
        try:
            mtime = path.stat().st_mtime
        except OSError:
            return False
        if seconds is None:
            return True
        age = max(0.0, time.time() - mtime)
        return age < seconds

    def read(self, url: str) -> str:
        """Return the stored body for ``url``."""
        path = self.path_for(url)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read cache file {path}: {e}") from e

    def write(self, url: str, body: str) -> Path:
        """Store ``body`` for ``url`` (tmp file + rename, so readers never see partial data)."""
        path = self.path_for(url)
        tmp = path.with_name(f"{path.name}.tmp.{os.getpid()}")
        try:
            tmp.write_text(body, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Cannot write cache file {path}: {e}") from e
        LOG.debug("Cached %s -> %s", url, path)
        return path

    def clear(self) -> int:
        """Delete every cached body; returns how many files were removed."""
        if not self._directory.is_dir():
            return 0
        removed = 0
        try:
            for entry in self._directory.iterdir():
                if entry.is_file():
                    entry.unlink()
                    removed += 1
        except OSError as e:
            raise StorageError(f"Cannot clear cache directory {self._directory}: {e}") from e
        LOG.info("Cleared %s cached responses from %s", removed, self._directory)
        return removed

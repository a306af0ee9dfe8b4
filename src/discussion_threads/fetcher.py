"""HTTP page fetcher with optional on-disk caching."""

import hashlib
from pathlib import Path

import requests
from loguru import logger

from discussion_threads.config import HTTP_TIMEOUT, PAGE_CACHE_PREFIX, USER_AGENT
from discussion_threads.errors import FetchFailedError


class PageFetcher:
    """Fetch discussion pages over HTTP.

    With ``from_cache`` set, page bodies are stored under ``PAGE_CACHE_PREFIX``
    and served from there on later calls. This returns stale data, but avoids
    rate limits while developing a provider.
    """

    def __init__(self, *, from_cache: bool = False, timeout: float = HTTP_TIMEOUT) -> None:
        self.from_cache = from_cache
        self.timeout = timeout
        self.sess = requests.Session()
        self.sess.headers["User-Agent"] = USER_AGENT

        self.cache_prefix: str | None = PAGE_CACHE_PREFIX if from_cache else None
        if self.cache_prefix:
            Path(self.cache_prefix).parent.mkdir(parents=True, exist_ok=True)

        logger.debug(
            "Fetcher ready: from_cache {!r}, cache_prefix {!r}, timeout {}s",
            self.from_cache,
            self.cache_prefix,
            self.timeout,
        )

    def _cache_path(self, url: str) -> Path | None:
        if not self.cache_prefix:
            return None
        return Path(self.cache_prefix + hashlib.sha1(url.encode("utf-8")).hexdigest() + ".html")

    def fetch(self, url: str) -> str:
        """Return the page body at ``url``.

        Raises:
            FetchFailedError: On connection errors, timeouts or a non-200 status.
        """
        cache_path = self._cache_path(url)
        if cache_path is not None and cache_path.exists():
            logger.debug("Filled from cache: {!r}", str(cache_path))
            return cache_path.read_text(encoding="utf-8")

        logger.debug("Fetching {}", url)
        try:
            r = self.sess.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchFailedError(url, str(exc)) from exc

        if r.status_code != 200:
            raise FetchFailedError(url, f"HTTP error: {r.status_code}")

        if cache_path is not None:
            cache_path.write_text(r.text, encoding="utf-8")
        return r.text

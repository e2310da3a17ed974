"""JSON-over-HTTP feed with an on-disk document cache."""

import hashlib
import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import requests


logger = logging.getLogger(__name__)

# Default cache directory
CACHE_DIR = Path.home() / ".warroom" / "cache"

USER_AGENT = "WarRoom/1.0 (IPL Auction Valuation)"


class FeedError(Exception):
    """Base exception for feed errors."""

    pass


class RateLimitError(FeedError):
    """Raised when the feed host answers 429."""

    pass


class FetchError(FeedError):
    """Raised when fetching a document fails."""

    pass


class ParseError(FeedError):
    """Raised when a document or record cannot be parsed."""

    pass


class FeedCache:
    """
    Decoded feed documents stored as JSON files, one per URL.

    Entries older than the TTL read as missing; unreadable entries are
    removed on read.
    """

    def __init__(self, cache_dir: Optional[Path] = None, ttl_hours: float = 24) -> None:
        self.cache_dir = cache_dir or CACHE_DIR
        self.ttl = timedelta(hours=ttl_hours)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, url: str) -> Path:
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:32]
        return self.cache_dir / f"feed-{digest}.json"

    def get(self, url: str) -> Optional[Any]:
        """Return the cached document for a URL, or None if absent or stale."""
        path = self.path_for(url)
        if not path.exists():
            return None

        try:
            entry = json.loads(path.read_text(encoding="utf-8"))
            fetched_at = datetime.fromisoformat(entry["fetched_at"])
            document = entry["document"]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            logger.debug("Discarding unreadable cache entry %s", path)
            path.unlink(missing_ok=True)
            return None

        if datetime.now() - fetched_at >= self.ttl:
            return None
        return document

    def put(self, url: str, document: Any) -> None:
        entry = {
            "url": url,
            "fetched_at": datetime.now().isoformat(),
            "document": document,
        }
        self.path_for(url).write_text(json.dumps(entry), encoding="utf-8")


class JsonFeed:
    """
    Fetches one JSON document from a URL.

    Args:
        url: Location of the document.
        cache: Document cache; None disables caching.
        session: HTTP session, created when not supplied.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        url: str,
        cache: Optional[FeedCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.url = url
        self.cache = cache
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    def fetch(self, use_cache: bool = True) -> Any:
        """
        Return the decoded document, from cache when fresh.

        Raises:
            RateLimitError: If the host answers 429.
            FetchError: If the request fails.
            ParseError: If the body is not JSON.
        """
        if use_cache and self.cache is not None:
            document = self.cache.get(self.url)
            if document is not None:
                logger.debug("Cache hit for %s", self.url)
                return document

        logger.info("Fetching %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise FetchError(f"Request timed out: {self.url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 429:
                raise RateLimitError(f"Rate limited: {self.url}") from e
            raise FetchError(f"HTTP error {status}: {self.url}") from e
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request failed: {self.url} - {e}") from e

        try:
            document = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {self.url}: {e}") from e

        if self.cache is not None:
            self.cache.put(self.url, document)
        return document

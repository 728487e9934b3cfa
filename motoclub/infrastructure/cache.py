"""In-process TTL cache for content reads.

Entries expire a fixed number of seconds after they were stored.
The clock is injectable so expiry can be tested without sleeping.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable

import structlog

logger = structlog.get_logger()

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    """A cached value with its expiry time.

    Attributes:
        value: The cached value.
        expires_at: Clock reading after which the entry is stale.
    """

    value: Any
    expires_at: float


class TTLCache:
    """Key/value cache with per-entry expiry."""

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Lifetime of a stored entry.
            clock: Function returning the current time in seconds.
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}

    def get(self, key: Hashable) -> Any | None:
        """Get a cached value.

        Args:
            key: Cache key.

        Returns:
            The value if present and not expired, None otherwise.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() >= entry.expires_at:
            del self._entries[key]
            return None

        return entry.value

    def set(self, key: Hashable, value: Any, ttl_seconds: float | None = None) -> None:
        """Store a value.

        Args:
            key: Cache key.
            value: Value to store.
            ttl_seconds: Override for the default lifetime.
        """
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)

    def delete(self, key: Hashable) -> None:
        """Remove a key if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def cleanup_expired(self) -> int:
        """Remove expired entries.

        Returns:
            Number of entries removed.
        """
        now = self._clock()
        expired_keys = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired_keys:
            del self._entries[key]
        if expired_keys:
            logger.debug("Expired cache entries removed", count=len(expired_keys))
        return len(expired_keys)

    def __len__(self) -> int:
        return len(self._entries)

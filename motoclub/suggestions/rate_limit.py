"""Fixed-window rate limiting for product suggestions.

Entries live in a pluggable store so the limiter can be backed by a
shared key/value service in multi-process deployments. The default
store is process-local and forgets everything on restart.

Increments are plain read-modify-write without locking. Concurrent
requests from one address may overshoot the limit slightly.
"""

import time
from dataclasses import dataclass
from typing import Callable, Protocol

import structlog

from motoclub.infrastructure.cache import TTLCache

logger = structlog.get_logger()

Clock = Callable[[], float]


@dataclass
class RateLimitEntry:
    """Submission count for one client address.

    Attributes:
        count: Submissions in the current window.
        reset_at: Clock reading when the window ends.
    """

    count: int
    reset_at: float


class RateLimitStore(Protocol):
    """Storage for rate limit entries with expiry."""

    def get(self, key: str) -> RateLimitEntry | None: ...

    def set(self, key: str, entry: RateLimitEntry, ttl_seconds: float) -> None: ...


class InMemoryRateLimitStore:
    """Process-local rate limit store.

    Expired windows are swept on every write, so addresses seen only
    once do not accumulate.
    """

    def __init__(self, clock: Clock = time.time) -> None:
        self._cache = TTLCache(ttl_seconds=0, clock=clock)

    def get(self, key: str) -> RateLimitEntry | None:
        return self._cache.get(key)

    def set(self, key: str, entry: RateLimitEntry, ttl_seconds: float) -> None:
        self._cache.cleanup_expired()
        self._cache.set(key, entry, ttl_seconds=ttl_seconds)

    def __len__(self) -> int:
        return len(self._cache)


class RateLimiter:
    """Allows a fixed number of hits per address per window."""

    def __init__(
        self,
        max_requests: int = 5,
        window_seconds: float = 3600,
        store: RateLimitStore | None = None,
        clock: Clock = time.time,
    ) -> None:
        """Initialize limiter.

        Args:
            max_requests: Hits allowed per window.
            window_seconds: Window length.
            store: Entry storage; in-memory if not provided.
            clock: Function returning the current time in seconds.
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._store = store if store is not None else InMemoryRateLimitStore(clock)

    def hit(self, key: str) -> bool:
        """Record a hit for a key.

        Args:
            key: Client address.

        Returns:
            True if the hit is allowed, False if the key is over its limit.
        """
        now = self._clock()
        entry = self._store.get(key)

        if entry is None or now > entry.reset_at:
            self._store.set(
                key,
                RateLimitEntry(count=1, reset_at=now + self.window_seconds),
                ttl_seconds=self.window_seconds,
            )
            return True

        if entry.count >= self.max_requests:
            logger.warning(
                "Rate limit exceeded",
                client=key,
                count=entry.count,
                reset_in_seconds=round(entry.reset_at - now, 1),
            )
            return False

        entry.count += 1
        self._store.set(key, entry, ttl_seconds=max(entry.reset_at - now, 0))
        return True

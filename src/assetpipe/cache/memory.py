"""In-process response cache.

Thread-safe, bounded, with optional per-entry expiry. Shared by every
request the middleware handles.
"""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

from assetpipe.errors import ConfigurationError

logger = logging.getLogger("assetpipe.cache")


class MemoryCache:
    """Least-recently-used byte cache with optional TTL.

    Expired entries are dropped when read. Above ``max_entries`` the
    least recently used entry is evicted.
    """

    __slots__ = ("_clock", "_default_ttl", "_entries", "_lock", "_max_entries")

    def __init__(
        self,
        max_entries: int = 1024,
        *,
        default_ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            msg = f"max_entries must be >= 1, got {max_entries}"
            raise ConfigurationError(msg)
        self._max_entries = max_entries
        self._default_ttl = default_ttl
        self._clock = clock
        self._lock = threading.Lock()
        # key -> (value, expires_at)
        self._entries: OrderedDict[str, tuple[bytes, float | None]] = OrderedDict()

    def get(self, key: str) -> bytes | None:
        """Return the cached bytes for *key*, or ``None`` on a miss."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= now:
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return value

    def set(self, key: str, value: bytes, *, ttl: float | None = None) -> None:
        """Store *value* under *key*, replacing any previous entry."""
        ttl = ttl if ttl is not None else self._default_ttl
        expires_at = self._clock() + ttl if ttl is not None else None
        with self._lock:
            self._entries[key] = (value, expires_at)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("evicted %s", evicted)

    def delete(self, key: str) -> None:
        """Drop *key* if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

"""Response caching: the cache protocol, an in-memory store, key schemes."""

from assetpipe.cache.keys import CacheKeyScheme, fingerprint_key, route_key, route_query_key
from assetpipe.cache.memory import MemoryCache
from assetpipe.cache.protocol import ResponseCache

__all__ = [
    "CacheKeyScheme",
    "MemoryCache",
    "ResponseCache",
    "fingerprint_key",
    "route_key",
    "route_query_key",
]

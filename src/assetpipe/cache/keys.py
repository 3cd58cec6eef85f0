"""Cache key schemes.

A scheme maps ``(asset, request, fingerprint)`` to the key under which
the asset's bytes are stored in the response cache. ``fingerprint`` is
the asset's ``cache_key`` for the request, computed once by the
middleware. Pick one with ``AssetOptions(cache_key=...)`` or pass any
callable of the same shape.
"""

from collections.abc import Callable
from typing import TypeAlias

from assetpipe.assets.protocol import AssetLike
from assetpipe.http.request import Request

CacheKeyScheme: TypeAlias = Callable[[AssetLike, Request, str | None], str]

_PREFIX = "assetpipe"


def route_key(asset: AssetLike, request: Request, fingerprint: str | None = None) -> str:
    """One entry per route, whatever the query string."""
    return f"{_PREFIX}:{asset.route}"


def route_query_key(asset: AssetLike, request: Request, fingerprint: str | None = None) -> str:
    """One entry per route and (order-insensitive) query string."""
    query = request.query.canonical()
    if not query:
        return route_key(asset, request)
    return f"{_PREFIX}:{asset.route}?{query}"


def fingerprint_key(asset: AssetLike, request: Request, fingerprint: str | None = None) -> str:
    """Key on the asset's own fingerprint, so a changed asset misses.

    Falls back to ``route_query_key`` for assets without a fingerprint.
    """
    if not fingerprint:
        return route_query_key(asset, request)
    return f"{_PREFIX}:{asset.route}:{fingerprint}"

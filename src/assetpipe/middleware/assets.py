"""Asset serving middleware.

The single per-request decision point for asset delivery. For a request
whose path matches a registered asset, exactly one of three things
happens:

1. ``If-None-Match`` equals the asset's cache key -> ``304``, empty body.
2. The response cache holds the asset's bytes -> serve them.
3. Otherwise -> produce the bytes, serve them, and cache them.

Paths without an asset fall through to the next handler.
"""

import logging

from assetpipe._internal.invoke import invoke
from assetpipe.assets.pipeline import AssetPipeline
from assetpipe.assets.protocol import AssetLike
from assetpipe.cache.memory import MemoryCache
from assetpipe.cache.protocol import ResponseCache
from assetpipe.config import AssetOptions
from assetpipe.http.request import Request
from assetpipe.http.response import Response
from assetpipe.middleware.encoding import SUPPORTED_ENCODINGS, encode_response, encoded_etag
from assetpipe.middleware.protocol import Next

logger = logging.getLogger("assetpipe.middleware")

_SERVED_METHODS = frozenset({"GET", "HEAD"})


def etag_matches(if_none_match: str | None, key: str | None) -> bool:
    """Whether an ``If-None-Match`` value names the asset's current key.

    The comparison is exact. Any tag the middleware sends as ``ETag``
    (``"<key>"``, ``"<key>-gzip"``, ``"<key>-deflate"``) matches too.
    """
    if not if_none_match or not key:
        return False
    if if_none_match == key:
        return True
    return any(
        if_none_match == encoded_etag(key, encoding)
        for encoding in (None, *SUPPORTED_ENCODINGS)
    )


class AssetMiddleware:
    """Serve registered assets with ETag revalidation and a response cache.

    Usage::

        pipeline = AssetPipeline()
        pipeline.add_bundle("/site.css", "reset.css", "layout.css", directory="styles")

        middleware = AssetMiddleware(pipeline, options=AssetOptions(memory_cache_ttl=600))
        response = await middleware(request, next)

    Asset production errors propagate to the caller. Cache errors never
    do: a failed lookup counts as a miss, a failed write is logged and
    dropped.
    """

    __slots__ = ("_cache", "_options", "_pipeline")

    def __init__(
        self,
        pipeline: AssetPipeline,
        cache: ResponseCache | None = None,
        options: AssetOptions | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._cache = cache if cache is not None else MemoryCache()
        self._options = options or AssetOptions()

    @property
    def pipeline(self) -> AssetPipeline:
        return self._pipeline

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def options(self) -> AssetOptions:
        return self._options

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve the matching asset or fall through."""
        if request.method not in _SERVED_METHODS:
            return await next(request)

        asset = self._pipeline.find_by_route(request.path)
        if asset is None:
            return await next(request)

        # Content type is set first so every outcome below carries it.
        response = Response(content_type=asset.content_type)
        # Computed once: the 304 check, the ETag and the cache key all use it.
        etag = await invoke(asset.cache_key, request)

        if_none_match = request.if_none_match
        if etag_matches(if_none_match, etag):
            logger.debug("304 %s", request.path)
            response = encode_response(response.with_status(304), request, self._options)
            # Echo the tag the client validated; a bare key maps to the identity tag.
            tag = if_none_match if if_none_match.startswith('"') else encoded_etag(etag, None)
            return self._with_cache_headers(response, request, tag)

        body = await self._load(asset, request, etag)
        response = encode_response(response.with_body(body), request, self._options)
        tag = encoded_etag(etag, response.header("Content-Encoding")) if etag else None
        return self._with_cache_headers(response, request, tag)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _load(self, asset: AssetLike, request: Request, etag: str | None) -> bytes:
        """Cached bytes for *asset*, producing (and caching) them on a miss."""
        if not self._options.enable_memory_cache:
            return await self._produce(asset, request)

        key = self._options.cache_key(asset, request, etag)
        cached = self._cache_get(key)
        if cached is not None:
            logger.debug("cache hit %s (%s)", request.path, key)
            return cached

        body = await self._produce(asset, request)
        self._cache_set(key, body)
        return body

    async def _produce(self, asset: AssetLike, request: Request) -> bytes:
        body = await invoke(asset.produce, request)
        if isinstance(body, str):
            body = body.encode("utf-8")
        logger.debug("produced %s (%d bytes)", request.path, len(body))
        return bytes(body)

    def _cache_get(self, key: str) -> bytes | None:
        try:
            return self._cache.get(key)
        except Exception:
            logger.warning("cache lookup failed for %s; producing instead", key, exc_info=True)
            return None

    def _cache_set(self, key: str, body: bytes) -> None:
        try:
            self._cache.set(key, body, ttl=self._options.memory_cache_ttl)
        except Exception:
            logger.warning("cache write failed for %s", key, exc_info=True)

    def _with_cache_headers(
        self, response: Response, request: Request, tag: str | None
    ) -> Response:
        """Add ``ETag`` and ``Cache-Control`` when HTTP caching is on."""
        opts = self._options
        if not opts.enable_caching or not tag:
            return response
        cache_control = opts.cache_control
        if opts.version_param and opts.version_param in request.query:
            cache_control = f"{cache_control}, immutable"
        return response.with_header("ETag", tag).with_header("Cache-Control", cache_control)

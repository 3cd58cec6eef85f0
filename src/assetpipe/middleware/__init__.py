"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    AssetMiddleware -- Serve registered assets with ETag revalidation and caching
"""

from assetpipe.middleware.assets import AssetMiddleware
from assetpipe.middleware.protocol import Middleware, Next

__all__ = ["AssetMiddleware", "Middleware", "Next"]

"""assetpipe: serve bundled assets with ETag revalidation and a response cache.

Register assets, put the middleware in front of your ASGI app::

    from assetpipe import AssetPipeline, AssetsApp

    pipeline = AssetPipeline()
    pipeline.add_bundle("/site.css", "reset.css", "layout.css", directory="styles")

    app = AssetsApp(my_asgi_app, pipeline=pipeline)

Or call the middleware directly from any ``(request, next)`` chain::

    from assetpipe import AssetMiddleware

    middleware = AssetMiddleware(pipeline)
    response = await middleware(request, next)
"""

__version__ = "0.1.0"
__all__ = [
    "Asset",
    "AssetLike",
    "AssetMiddleware",
    "AssetOptions",
    "AssetPipeError",
    "AssetPipeline",
    "AssetsApp",
    "ConfigurationError",
    "DuplicateRouteError",
    "FileBundle",
    "MemoryCache",
    "Request",
    "Response",
    "ResponseCache",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import assetpipe`` fast while providing a clean top-level API.
    """
    if name in ("Asset", "AssetLike", "AssetPipeline", "FileBundle"):
        import assetpipe.assets as assets

        return getattr(assets, name)

    if name == "AssetMiddleware":
        from assetpipe.middleware.assets import AssetMiddleware

        return AssetMiddleware

    if name == "AssetOptions":
        from assetpipe.config import AssetOptions

        return AssetOptions

    if name == "AssetsApp":
        from assetpipe.server.handler import AssetsApp

        return AssetsApp

    if name in ("MemoryCache", "ResponseCache"):
        import assetpipe.cache as cache

        return getattr(cache, name)

    if name in ("Request", "Response"):
        import assetpipe.http as http

        return getattr(http, name)

    if name in ("AssetPipeError", "ConfigurationError", "DuplicateRouteError"):
        import assetpipe.errors as errors

        return getattr(errors, name)

    msg = f"module 'assetpipe' has no attribute {name!r}"
    raise AttributeError(msg)

"""ASGI adapter — puts the asset middleware in front of any ASGI app.

The only component that touches raw ASGI directly. Converts the scope
to a ``Request``, runs ``AssetMiddleware``, and either sends the asset
response or hands the untouched scope to the wrapped app.
"""

from assetpipe._internal.asgi import ASGIApp, Receive, Scope, Send
from assetpipe.assets.pipeline import AssetPipeline
from assetpipe.cache.protocol import ResponseCache
from assetpipe.config import AssetOptions
from assetpipe.http.request import Request
from assetpipe.http.response import Response
from assetpipe.middleware.assets import AssetMiddleware
from assetpipe.server.sender import send_response

_NOT_FOUND = Response(body=b"Not Found", status=404, content_type="text/plain; charset=utf-8")


class AssetsApp:
    """ASGI application serving assets, delegating everything else.

    Usage::

        app = AssetsApp(django_or_starlette_app, pipeline=pipeline)

    Without a wrapped app, unmatched paths get a plain ``404``.
    Non-HTTP scopes (``lifespan``, ``websocket``) go straight to the
    wrapped app.
    """

    __slots__ = ("_app", "_middleware")

    def __init__(
        self,
        app: ASGIApp | None = None,
        *,
        pipeline: AssetPipeline,
        cache: ResponseCache | None = None,
        options: AssetOptions | None = None,
    ) -> None:
        self._app = app
        self._middleware = AssetMiddleware(pipeline, cache=cache, options=options)

    @property
    def middleware(self) -> AssetMiddleware:
        return self._middleware

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            if self._app is not None:
                await self._app(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        passed_through = False

        async def next(_request: Request) -> Response:
            nonlocal passed_through
            passed_through = True
            return _NOT_FOUND

        response = await self._middleware(request, next)

        if passed_through and self._app is not None:
            await self._app(scope, receive, send)
            return

        await send_response(response, send, head=request.method == "HEAD")

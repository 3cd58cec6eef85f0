"""Asset protocol.

An asset is anything with this shape::

    class MyAsset:
        route = "/bundle.css"
        content_type = "text/css"

        async def produce(self, request: Request) -> bytes: ...
        async def cache_key(self, request: Request) -> str | None: ...

No base class required. ``Asset`` and ``FileBundle`` both satisfy it,
and so do test doubles.
"""

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from assetpipe.http.request import Request


@runtime_checkable
class AssetLike(Protocol):
    """Protocol for a servable asset.

    ``produce`` may be sync or async and returns the asset's bytes.
    ``cache_key`` may be sync or async too; it returns a fingerprint of
    the current output, or ``None`` if the asset cannot be revalidated.
    """

    @property
    def route(self) -> str: ...

    @property
    def content_type(self) -> str: ...

    def produce(self, request: Request) -> bytes | Awaitable[bytes]: ...

    def cache_key(self, request: Request) -> str | None | Awaitable[str | None]: ...

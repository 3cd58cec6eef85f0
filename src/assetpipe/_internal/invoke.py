"""Invoke helpers — call sync or async producers uniformly.

An asset's ``produce`` and ``cache_key`` can be ``def`` or ``async def``.
Any code that calls them goes through here so the sync/async check lives
in exactly one place.

Usage::

    from assetpipe._internal.invoke import invoke

    body = await invoke(asset.produce, request)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        def produce(request):
            return b"*{color:red}"

        async def produce(request):
            return await render_bundle()
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result

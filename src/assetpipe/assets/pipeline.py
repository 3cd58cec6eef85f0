"""Asset pipeline — the registry of servable assets.

Routes are unique (case-insensitive). Registration takes a lock;
lookups are plain dict reads and safe from any thread or task.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Iterable, Iterator
from typing import TypeVar

from assetpipe.assets.asset import route_lookup_key
from assetpipe.assets.bundle import FileBundle, Processor
from assetpipe.assets.protocol import AssetLike
from assetpipe.errors import DuplicateRouteError

A = TypeVar("A", bound=AssetLike)


class AssetPipeline:
    """Ordered collection of assets, looked up by request path.

    Seed it through the constructor or register assets one by one::

        pipeline = AssetPipeline([Asset.from_content("/robots.txt", "")])
        pipeline.add_bundle("/site.js", "a.js", "b.js", directory="./js")
    """

    __slots__ = ("_assets", "_lock")

    def __init__(self, assets: Iterable[AssetLike] = ()) -> None:
        self._assets: dict[str, AssetLike] = {}
        self._lock = threading.Lock()
        for asset in assets:
            self.add(asset)

    def add(self, asset: A) -> A:
        """Register *asset* and return it.

        Raises:
            DuplicateRouteError: If the route is already registered.
        """
        key = route_lookup_key(asset.route)
        with self._lock:
            if key in self._assets:
                raise DuplicateRouteError(asset.route)
            self._assets[key] = asset
        return asset

    def add_bundle(
        self,
        route: str,
        *files: str | os.PathLike[str],
        content_type: str | None = None,
        directory: str | os.PathLike[str] | None = None,
        separator: str | bytes = "\n",
        processors: Iterable[Processor] = (),
    ) -> FileBundle:
        """Register a ``FileBundle`` built from *files*."""
        bundle = FileBundle(
            route,
            files,
            content_type=content_type,
            directory=directory,
            separator=separator,
            processors=processors,
        )
        return self.add(bundle)

    def find_by_route(self, path: str) -> AssetLike | None:
        """Return the asset registered for *path*, or ``None``."""
        if not path:
            return None
        return self._assets.get(route_lookup_key(path))

    def all(self) -> tuple[AssetLike, ...]:
        """Every registered asset, in registration order."""
        return tuple(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[AssetLike]:
        return iter(self.all())

    def __contains__(self, route: object) -> bool:
        if not isinstance(route, str):
            return False
        return route_lookup_key(route) in self._assets

"""File bundles — concatenate source files into one asset.

A bundle reads its files on every production (the response cache keeps
the result), so edits on disk show up as soon as the cache entry is
gone. The cache key tracks each file's modification time and size,
which makes ``If-None-Match`` revalidation follow edits too.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeAlias

import anyio

from assetpipe.assets.asset import digest_key, guess_content_type, normalize_route
from assetpipe.errors import ConfigurationError
from assetpipe.http.request import Request

Processor: TypeAlias = Callable[[bytes], bytes]


class FileBundle:
    """An asset built by concatenating files.

    Processors run in order over the joined bytes. They are the place to
    plug in a minifier; assetpipe ships none.

    Usage::

        bundle = FileBundle(
            "/site.css",
            ["reset.css", "layout.css"],
            directory="./styles",
        )
    """

    __slots__ = ("_content_type", "_files", "_processors", "_route", "_separator")

    def __init__(
        self,
        route: str,
        files: Iterable[str | os.PathLike[str]],
        *,
        content_type: str | None = None,
        directory: str | os.PathLike[str] | None = None,
        separator: str | bytes = "\n",
        processors: Iterable[Processor] = (),
    ) -> None:
        self._route = normalize_route(route)
        base = Path(directory) if directory is not None else None
        self._files = tuple(base / f if base is not None else Path(f) for f in files)
        if not self._files:
            msg = f"Bundle {self._route!r} has no source files"
            raise ConfigurationError(msg)
        self._content_type = content_type or guess_content_type(self._route)
        self._separator = separator.encode("utf-8") if isinstance(separator, str) else separator
        self._processors = tuple(processors)

    def __repr__(self) -> str:
        return f"FileBundle({self._route!r}, files={len(self._files)})"

    @property
    def route(self) -> str:
        return self._route

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def files(self) -> tuple[Path, ...]:
        return self._files

    async def produce(self, request: Request) -> bytes:
        """Read and join the files, then run the processors.

        Raises:
            FileNotFoundError: If a source file is missing.
        """
        chunks = [await anyio.Path(path).read_bytes() for path in self._files]
        body = self._separator.join(chunks)
        for processor in self._processors:
            body = processor(body)
        return body

    async def cache_key(self, request: Request) -> str | None:
        """Digest of the route, each file's stat data and the processors."""
        parts: list[str] = [self._route]
        for path in self._files:
            try:
                st = await anyio.Path(path).stat()
            except FileNotFoundError:
                parts.append(f"{path}:missing")
            else:
                parts.append(f"{path}:{st.st_mtime_ns}:{st.st_size}")
        parts.extend(
            getattr(processor, "__qualname__", type(processor).__qualname__)
            for processor in self._processors
        )
        return digest_key(parts)

"""Immutable HTTP request.

Frozen metadata only. Asset requests never read a body, so the request
carries just what the asset decision needs: method, path, headers and
query string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from assetpipe.http.headers import Headers
from assetpipe.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Created once per inbound request by the server adapter and shared
    read-only with the middleware, the asset and the cache-key scheme.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str = "1.1"

    # -- Computed properties --

    @property
    def if_none_match(self) -> str | None:
        """The ``If-None-Match`` header, or ``None`` when absent or blank."""
        value = self.headers.get("if-none-match")
        if value is None or not value.strip():
            return None
        return value

    @property
    def accept_encoding(self) -> str | None:
        """All ``Accept-Encoding`` values joined into one list, if present."""
        values = self.headers.get_list("accept-encoding")
        if not values:
            return None
        return ", ".join(values)

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
        )

    @classmethod
    def build(
        cls,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        """Create a Request without an ASGI scope (scripts and tests)."""
        return cls(
            method=method,
            path=path,
            headers=Headers.from_mapping(headers or {}),
            query=QueryParams(query_string.encode("latin-1")),
        )

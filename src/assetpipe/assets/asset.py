"""Asset — one route, one content type, bytes on demand.

Also holds the route and fingerprint helpers shared by every asset type.
"""

from __future__ import annotations

import base64
import hashlib
import mimetypes
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias

from assetpipe.errors import ConfigurationError
from assetpipe.http.request import Request

Producer: TypeAlias = Callable[[Request], bytes | Awaitable[bytes]]
Fingerprint: TypeAlias = Callable[[Request], str | None]


def normalize_route(route: str) -> str:
    """Ensure a single leading slash. Rejects empty routes."""
    stripped = route.strip()
    if not stripped or stripped == "/":
        msg = f"Asset route must name a path, got {route!r}"
        raise ConfigurationError(msg)
    return "/" + stripped.lstrip("/")


def route_lookup_key(route: str) -> str:
    """Registry key for a route: leading slash, case-folded."""
    return ("/" + route.strip().lstrip("/")).lower()


def guess_content_type(route: str) -> str:
    """Guess a content type from the route's extension."""
    content_type, _ = mimetypes.guess_type(route)
    if content_type is None:
        return "application/octet-stream"
    if content_type.startswith("text/") or content_type == "application/javascript":
        return f"{content_type}; charset=utf-8"
    return content_type


def digest_key(parts: Iterable[str | bytes]) -> str:
    """URL-safe SHA-1 digest over *parts*, without padding."""
    digest = hashlib.sha1(usedforsecurity=False)
    for part in parts:
        digest.update(part.encode("utf-8") if isinstance(part, str) else part)
        digest.update(b"\x00")
    return base64.urlsafe_b64encode(digest.digest()).decode("ascii").rstrip("=")


@dataclass(frozen=True, slots=True)
class Asset:
    """An immutable asset descriptor.

    ``produce`` builds the asset's bytes for a request. ``fingerprint``
    computes its cache key; without one the asset is never answered
    with ``304 Not Modified``.

    Usage::

        Asset(
            route="/site.css",
            content_type="text/css",
            produce=build_site_css,
            fingerprint=lambda request: SITE_CSS_VERSION,
        )
    """

    route: str
    content_type: str
    produce: Producer
    fingerprint: Fingerprint | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "route", normalize_route(self.route))
        if not self.content_type.strip():
            msg = f"Asset {self.route!r} needs a content type"
            raise ConfigurationError(msg)

    def cache_key(self, request: Request) -> str | None:
        """The asset's fingerprint for *request*, if it declares one."""
        if self.fingerprint is None:
            return None
        return self.fingerprint(request)

    @classmethod
    def from_content(
        cls,
        route: str,
        content: str | bytes,
        content_type: str | None = None,
    ) -> Asset:
        """Fixed-content asset fingerprinted by a hash of its content."""
        body = content.encode("utf-8") if isinstance(content, str) else content
        key = digest_key((body,))
        return cls(
            route=route,
            content_type=content_type or guess_content_type(route),
            produce=lambda request: body,
            fingerprint=lambda request: key,
        )

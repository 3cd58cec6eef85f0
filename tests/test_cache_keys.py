"""Tests for assetpipe.cache.keys — response-cache key schemes."""

from assetpipe.assets.asset import Asset
from assetpipe.cache.keys import fingerprint_key, route_key, route_query_key
from assetpipe.http.request import Request


def _asset() -> Asset:
    return Asset(route="/file.css", content_type="text/css", produce=lambda request: b"")


class TestRouteKey:
    def test_ignores_query(self) -> None:
        a = route_key(_asset(), Request.build("/file.css", query_string="v=1"), "etag")
        b = route_key(_asset(), Request.build("/file.css"), None)
        assert a == b == "assetpipe:/file.css"


class TestRouteQueryKey:
    def test_without_query(self) -> None:
        assert route_query_key(_asset(), Request.build("/file.css")) == "assetpipe:/file.css"

    def test_includes_query(self) -> None:
        key = route_query_key(_asset(), Request.build("/file.css", query_string="v=1"))
        assert key == "assetpipe:/file.css?v=1"

    def test_query_order_does_not_matter(self) -> None:
        a = route_query_key(_asset(), Request.build("/file.css", query_string="b=2&a=1"))
        b = route_query_key(_asset(), Request.build("/file.css", query_string="a=1&b=2"))
        assert a == b


class TestFingerprintKey:
    def test_uses_fingerprint(self) -> None:
        key = fingerprint_key(_asset(), Request.build("/file.css"), "etag")
        assert key == "assetpipe:/file.css:etag"

    def test_changes_with_fingerprint(self) -> None:
        request = Request.build("/file.css")
        one = fingerprint_key(_asset(), request, "one")
        assert one != fingerprint_key(_asset(), request, "two")

    def test_falls_back_to_route_and_query(self) -> None:
        request = Request.build("/file.css", query_string="v=3")
        assert fingerprint_key(_asset(), request, None) == route_query_key(_asset(), request)

    def test_does_not_call_the_asset(self) -> None:
        calls: list[Request] = []

        def fingerprint(request: Request) -> str:
            calls.append(request)
            return "live"

        asset = Asset(
            route="/file.css",
            content_type="text/css",
            produce=lambda request: b"",
            fingerprint=fingerprint,
        )
        assert fingerprint_key(asset, Request.build("/file.css"), "given") == (
            "assetpipe:/file.css:given"
        )
        assert calls == []

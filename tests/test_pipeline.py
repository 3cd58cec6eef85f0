"""Tests for assetpipe.assets.pipeline — the asset registry."""

import pytest

from assetpipe.assets.asset import Asset
from assetpipe.assets.bundle import FileBundle
from assetpipe.assets.pipeline import AssetPipeline
from assetpipe.errors import ConfigurationError, DuplicateRouteError


def _asset(route: str) -> Asset:
    return Asset.from_content(route, f"/* {route} */")


class TestAssetPipeline:
    def test_seeded_through_constructor(self) -> None:
        css = _asset("/file.css")
        pipeline = AssetPipeline([css])
        assert pipeline.find_by_route("/file.css") is css

    def test_unknown_route(self) -> None:
        assert AssetPipeline([_asset("/file.css")]).find_by_route("/other.css") is None

    def test_empty_path(self) -> None:
        assert AssetPipeline([_asset("/file.css")]).find_by_route("") is None

    def test_lookup_is_case_insensitive(self) -> None:
        css = _asset("/file.css")
        pipeline = AssetPipeline([css])
        assert pipeline.find_by_route("/FILE.css") is css

    def test_lookup_normalizes_leading_slash(self) -> None:
        css = _asset("/file.css")
        assert AssetPipeline([css]).find_by_route("file.css") is css

    def test_add_returns_asset(self) -> None:
        pipeline = AssetPipeline()
        css = _asset("/file.css")
        assert pipeline.add(css) is css
        assert len(pipeline) == 1

    def test_duplicate_route_rejected(self) -> None:
        pipeline = AssetPipeline([_asset("/file.css")])
        with pytest.raises(DuplicateRouteError) as exc_info:
            pipeline.add(_asset("/File.CSS"))
        assert exc_info.value.route == "/File.CSS"

    def test_duplicate_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            AssetPipeline([_asset("/a.js"), _asset("/a.js")])

    def test_all_keeps_registration_order(self) -> None:
        a, b, c = _asset("/c.css"), _asset("/a.css"), _asset("/b.css")
        pipeline = AssetPipeline([a, b, c])
        assert pipeline.all() == (a, b, c)
        assert list(pipeline) == [a, b, c]

    def test_contains(self) -> None:
        pipeline = AssetPipeline([_asset("/file.css")])
        assert "/file.css" in pipeline
        assert "/FILE.CSS" in pipeline
        assert "/other.css" not in pipeline
        assert 1 not in pipeline

    def test_add_bundle(self, tmp_path) -> None:
        (tmp_path / "a.js").write_text("var a;")
        pipeline = AssetPipeline()
        bundle = pipeline.add_bundle("/site.js", "a.js", directory=tmp_path)
        assert isinstance(bundle, FileBundle)
        assert pipeline.find_by_route("/site.js") is bundle
        assert bundle.content_type.startswith(("text/javascript", "application/javascript"))

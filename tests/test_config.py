"""Tests for assetpipe.config — AssetOptions frozen dataclass."""

import pytest

from assetpipe.cache.keys import fingerprint_key, route_key
from assetpipe.config import AssetOptions
from assetpipe.errors import ConfigurationError


class TestAssetOptions:
    def test_defaults(self) -> None:
        opts = AssetOptions()

        assert opts.enable_caching is True
        assert opts.cache_control == "public, max-age=31536000"
        assert opts.version_param == "v"
        assert opts.enable_memory_cache is True
        assert opts.memory_cache_ttl is None
        assert opts.cache_key is fingerprint_key
        assert opts.enable_compression is True
        assert opts.compression_min_size == 256
        assert opts.compression_level == 6
        assert "text/" in opts.compressible_types

    def test_override(self) -> None:
        opts = AssetOptions(enable_caching=False, memory_cache_ttl=60, cache_key=route_key)

        assert opts.enable_caching is False
        assert opts.memory_cache_ttl == 60
        assert opts.cache_key is route_key

    def test_frozen(self) -> None:
        opts = AssetOptions()
        with pytest.raises(AttributeError):
            opts.enable_caching = False  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"memory_cache_ttl": 0},
            {"memory_cache_ttl": -1.5},
            {"compression_min_size": -1},
            {"compression_level": 0},
            {"compression_level": 10},
            {"cache_control": "  "},
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ConfigurationError):
            AssetOptions(**kwargs)

    def test_blank_cache_control_allowed_when_caching_off(self) -> None:
        assert AssetOptions(enable_caching=False, cache_control="").cache_control == ""

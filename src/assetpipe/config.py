"""Asset middleware configuration.

AssetOptions is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from assetpipe.cache.keys import CacheKeyScheme, fingerprint_key
from assetpipe.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class AssetOptions:
    """Asset serving options. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = AssetOptions(enable_caching=False, memory_cache_ttl=300)
    """

    # HTTP caching (ETag + Cache-Control on served assets)
    enable_caching: bool = True
    cache_control: str = "public, max-age=31536000"  # 1 year
    version_param: str = "v"  # ?v=<hash> marks a versioned URL -> "immutable"

    # In-memory response cache
    enable_memory_cache: bool = True
    memory_cache_ttl: float | None = None
    cache_key: CacheKeyScheme = fingerprint_key

    # Content encoding
    enable_compression: bool = True
    compression_min_size: int = 256
    compression_level: int = 6
    compressible_types: tuple[str, ...] = (
        "text/",
        "application/javascript",
        "application/json",
        "application/xml",
        "image/svg+xml",
    )

    def __post_init__(self) -> None:
        if self.memory_cache_ttl is not None and self.memory_cache_ttl <= 0:
            msg = f"memory_cache_ttl must be positive, got {self.memory_cache_ttl}"
            raise ConfigurationError(msg)
        if self.compression_min_size < 0:
            msg = f"compression_min_size must be >= 0, got {self.compression_min_size}"
            raise ConfigurationError(msg)
        if not 1 <= self.compression_level <= 9:
            msg = f"compression_level must be between 1 and 9, got {self.compression_level}"
            raise ConfigurationError(msg)
        if self.enable_caching and not self.cache_control.strip():
            msg = "cache_control must not be empty when enable_caching is True"
            raise ConfigurationError(msg)

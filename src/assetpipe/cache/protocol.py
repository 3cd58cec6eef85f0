"""Response cache protocol.

Any object with ``get`` and ``set`` can back the asset middleware::

    class RedisCache:
        def get(self, key: str) -> bytes | None: ...
        def set(self, key: str, value: bytes, *, ttl: float | None = None) -> None: ...

Implementations must tolerate concurrent calls. Writes for one key may
race; the last write wins.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResponseCache(Protocol):
    """Key -> bytes store used to skip re-producing assets."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes, *, ttl: float | None = None) -> None: ...

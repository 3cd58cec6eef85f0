"""Test utilities for assetpipe.

    from assetpipe.testing import TestClient
"""

from assetpipe.testing.client import TestClient

__all__ = ["TestClient"]

"""ASGI integration: the ``AssetsApp`` wrapper and response sending."""

from assetpipe.server.handler import AssetsApp
from assetpipe.server.sender import send_response

__all__ = ["AssetsApp", "send_response"]

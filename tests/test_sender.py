"""Tests for assetpipe.server.sender response emission rules."""

import pytest

from assetpipe.http.response import Response
from assetpipe.server.sender import send_response


class TestSendResponse:
    @pytest.mark.asyncio
    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response(b"*{color:red}", content_type="text/css"), send)

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/css"
        assert headers[b"content-length"] == b"12"
        assert messages[1]["body"] == b"*{color:red}"

    @pytest.mark.asyncio
    async def test_304_drops_body_and_sets_zero_content_length(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        # Even if a body slipped through, 304 must go out empty.
        await send_response(Response(b"unexpected-body").with_status(304), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_head_keeps_length_drops_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response(b"*{color:red}"), send, head=True)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"12"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_header_names_lowercased(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(Response(b"x").with_header("ETag", '"abc"'), send)

        assert (b"etag", b'"abc"') in messages[0]["headers"]

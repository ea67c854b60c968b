"""Tests for roost.server.sender response emission rules."""

from roost.http.response import Response
from roost.server.sender import send_response


async def _emit(response: Response, *, head: bool = False) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_body_and_headers(self) -> None:
        messages = await _emit(Response.json({"ok": True}).with_header("ETag", '"abc"'))
        headers = dict(messages[0]["headers"])
        assert messages[0]["status"] == 200
        assert headers[b"content-type"] == b"application/json"
        assert headers[b"etag"] == b'"abc"'
        assert headers[b"content-length"] == b"11"
        assert messages[1]["body"] == b'{"ok":true}'

    async def test_304_drops_body_and_content_type(self) -> None:
        messages = await _emit(Response("unexpected-body").with_status(304))
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert b"content-type" not in headers
        assert messages[1]["body"] == b""

    async def test_head_keeps_length_drops_body(self) -> None:
        messages = await _emit(Response("pong"), head=True)
        assert dict(messages[0]["headers"])[b"content-length"] == b"4"
        assert messages[1]["body"] == b""

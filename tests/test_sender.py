"""Tests for biscuit.server.sender response encoding."""

import pytest

from biscuit.http.response import Response
from biscuit.server.sender import encode_response


class TestEncodeResponse:
    def test_body_and_headers(self) -> None:
        start, body = encode_response(Response("ok"))

        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        headers = dict(start["headers"])
        assert headers[b"content-length"] == b"2"
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert body == {"type": "http.response.body", "body": b"ok"}

    @pytest.mark.parametrize("status", [101, 204, 304])
    def test_no_body_statuses(self, status: int) -> None:
        start, body = encode_response(Response("unexpected-body", status=status))

        assert dict(start["headers"])[b"content-length"] == b"0"
        assert body["body"] == b""

    def test_set_cookie_lines_not_merged(self) -> None:
        response = (
            Response("ok")
            .with_header("Set-Cookie", "a=1; Path=/")
            .with_header("Set-Cookie", "b=2")
        )
        start, _ = encode_response(response)

        cookies = [value for name, value in start["headers"] if name == b"set-cookie"]
        assert cookies == [b"a=1; Path=/", b"b=2"]

    def test_non_latin1_header_raises_before_send(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            encode_response(Response().with_header("Set-Cookie", "c=€"))

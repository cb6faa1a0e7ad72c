"""ASGI response encoding — a biscuit Response as ASGI send() messages."""

from typing import Any, TypeAlias

from biscuit.http.response import Response

Message: TypeAlias = dict[str, Any]


def _body_allowed(status: int) -> bool:
    # 1xx, 204 and 304 responses never carry a body.
    return not (100 <= status < 200 or status in {204, 304})


def encode_response(response: Response) -> tuple[Message, Message]:
    """Build the ``http.response.start`` and ``http.response.body`` messages.

    Header names are lowercased and repeated names (``Set-Cookie``) stay
    separate lines. Raises ``UnicodeEncodeError`` for a header value that
    is not latin-1, before anything has been sent.
    """
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    start = {"type": "http.response.start", "status": response.status, "headers": raw_headers}
    return start, {"type": "http.response.body", "body": body}

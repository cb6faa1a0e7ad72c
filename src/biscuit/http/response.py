"""HTTP response value.

Handlers return one (or a ``str`` / ``bytes`` body); middleware decorates
it with ``with_header()``, which always returns a new object.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Headers are an ordered tuple of pairs, so a name may appear more than
    once: every ``Set-Cookie`` is its own header line, never comma-joined.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with one more header line."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header_values(self, name: str) -> list[str]:
        """All values of header *name* (case-insensitive), in order."""
        name_lower = name.lower()
        return [value for key, value in self.headers if key.lower() == name_lower]

    @property
    def set_cookies(self) -> list[str]:
        """Every ``Set-Cookie`` header value on this response."""
        return self.header_values("set-cookie")

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

"""Cookie header parsing and the immutable ``Cookie`` value.

The read side turns raw ``Cookie:`` header text into name/value pairs.
The write side serializes a ``Cookie`` into a ``Set-Cookie`` header value.

Header text is attacker-controlled, so parsing never raises: segments
without ``=`` are dropped and header values that are not valid UTF-8 are
skipped whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger("biscuit.cookies")


def parse_cookie_pairs(header: str) -> list[tuple[str, str]]:
    """Split one ``Cookie`` header value into ``(name, value)`` pairs.

    Splits on ``;`` and then on the first ``=`` of each segment, trimming
    both sides. Order is preserved and duplicates are kept; callers that
    build a mapping get last-write-wins.
    """
    pairs: list[tuple[str, str]] = []
    for segment in header.split(";"):
        name, sep, value = segment.strip().partition("=")
        if sep:
            pairs.append((name.strip(), value.strip()))
    return pairs


def parse_cookie_headers(values: Iterable[bytes | str]) -> list[tuple[str, str]]:
    """Parse every ``Cookie`` header occurrence of a request.

    Raw ``bytes`` are decoded as UTF-8; a value that fails to decode is
    skipped without affecting the others.
    """
    pairs: list[tuple[str, str]] = []
    for raw in values:
        if isinstance(raw, bytes):
            try:
                header = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping Cookie header that is not valid UTF-8")
                continue
        else:
            header = raw
        pairs.extend(parse_cookie_pairs(header))
    return pairs


@dataclass(frozen=True, slots=True)
class Cookie:
    """A single cookie, optionally carrying ``Set-Cookie`` attributes.

    Immutable: changing a cookie means adding a new ``Cookie`` with the
    same name to the jar. Cookies parsed from a request carry no
    attributes, so ``Cookie("foo", "bar")`` serializes to ``foo=bar``.
    """

    name: str
    value: str
    max_age: int | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: str | None = None

    @classmethod
    def removal(cls, name: str, path: str | None = None) -> Cookie:
        """A cookie that tells the client to drop *name* (``Max-Age=0``)."""
        return cls(name=name, value="", max_age=0, path=path)

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        parts = [f"{self.name}={self.value}"]
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        if self.path:
            parts.append(f"Path={self.path}")
        if self.domain:
            parts.append(f"Domain={self.domain}")
        if self.secure:
            parts.append("Secure")
        if self.httponly:
            parts.append("HttpOnly")
        if self.samesite:
            parts.append(f"SameSite={self.samesite}")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header_value()

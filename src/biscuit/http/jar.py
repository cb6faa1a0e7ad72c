"""Per-request cookie jar with original-vs-current tracking.

The jar is filled from the request's ``Cookie`` headers via
``add_original()``. Handlers and middleware then ``add()`` and
``remove()`` cookies, and ``delta()`` reports exactly the cookies the
response must set. A cookie left equal to its original produces nothing.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from biscuit.http.cookies import Cookie

if TYPE_CHECKING:
    from biscuit.http.signed import SecretKey, SignedJar


class CookieJar:
    """Cookies visible to one request, plus whatever it added or removed.

    Owned by a single request; never shared or persisted.
    """

    __slots__ = ("_current", "_original", "_removed")

    def __init__(self) -> None:
        self._original: dict[str, Cookie] = {}
        self._current: dict[str, Cookie] = {}
        self._removed: dict[str, Cookie] = {}

    # -- Population --

    def add_original(self, cookie: Cookie) -> None:
        """Record a cookie that arrived with the request.

        A later cookie with the same name replaces an earlier one.
        """
        self._original[cookie.name] = cookie
        self._current[cookie.name] = cookie

    # -- Mutation --

    def add(self, cookie: Cookie) -> None:
        """Add or replace a cookie for the response."""
        self._current[cookie.name] = cookie

    def remove(self, name: str) -> None:
        """Remove a cookie.

        If the client sent it, the delta carries a removal cookie so the
        client drops it too. Removing an unknown name is a no-op.
        """
        self._current.pop(name, None)
        original = self._original.get(name)
        if original is not None:
            self._removed[name] = Cookie.removal(name, path=original.path)

    # -- Lookup --

    def get(self, name: str) -> Cookie | None:
        return self._current.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._current

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._current.values())

    def __len__(self) -> int:
        return len(self._current)

    def __repr__(self) -> str:
        return f"CookieJar({list(self._current)!r})"

    def view(self) -> Mapping[str, Cookie]:
        """Read-only, live mapping of the current cookies by name."""
        return MappingProxyType(self._current)

    # -- Response side --

    def delta(self) -> list[Cookie]:
        """Cookies that differ from what the request carried.

        Added or changed cookies come first in insertion order, then
        removal cookies for originals that were dropped.
        """
        changes = [
            cookie
            for name, cookie in self._current.items()
            if self._original.get(name) != cookie
        ]
        changes.extend(
            removal for name, removal in self._removed.items() if name not in self._current
        )
        return changes

    def signed(self, secret_key: SecretKey) -> SignedJar:
        """Return a signing view of this jar keyed by *secret_key*."""
        from biscuit.http.signed import SignedJar

        return SignedJar(self, secret_key)

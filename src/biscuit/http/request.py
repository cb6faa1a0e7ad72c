"""Immutable HTTP request.

Frozen request line and headers, plus the request-scoped ``RequestContext``
that carries the cookie jar and session.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from biscuit._internal.asgi import Scope
from biscuit.context import RequestContext
from biscuit.http.cookies import Cookie
from biscuit.http.headers import Headers
from biscuit.http.jar import CookieJar


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    The ``context`` field reference is frozen but its contents are not:
    middleware attaches the cookie jar and session to it, and handlers
    reach them through ``cookies()``, ``cookies_mut()``, ``session()`` and
    ``session_mut()``.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    context: RequestContext = field(default_factory=RequestContext, repr=False, compare=False)

    def cookies(self) -> Mapping[str, Cookie]:
        """Read-only view of the request's cookies by name."""
        return self.context.cookies()

    def cookies_mut(self) -> CookieJar:
        """The request's cookie jar; changes are sent as ``Set-Cookie``."""
        return self.context.cookies_mut()

    def session(self) -> Mapping[str, str]:
        """Read-only session data."""
        return self.context.session()

    def session_mut(self) -> dict[str, str]:
        """Mutable session data. Calling this marks the session dirty."""
        return self.context.session_mut()

    def regenerate_session(self) -> dict[str, str]:
        """Discard all session data, e.g. on login or logout."""
        return self.context.regenerate_session()

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
        )

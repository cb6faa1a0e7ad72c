"""Request-scoped state: the cookie jar and the session.

Each ``Request`` owns one ``RequestContext`` with a typed slot for each
piece of state. ``CookieMiddleware`` fills the jar slot and
``SessionMiddleware`` fills the session slot in their ``before`` hooks.
Reading a slot that was never filled raises ``MissingStateError``: the
middleware was not installed, or was installed in the wrong order.

Thread safety:
    A context belongs to exactly one request and is only touched by the
    middleware chain and handler of that request, one step at a time.
"""

from collections.abc import Mapping
from types import MappingProxyType

from biscuit.errors import MissingStateError
from biscuit.http.cookies import Cookie
from biscuit.http.jar import CookieJar


class Session:
    """Session data for one request plus its dirty flag.

    ``view()`` never changes the flag. ``mutable()`` always sets it, even
    if the caller ends up not changing anything: asking for write access
    is enough to make ``SessionMiddleware`` re-sign and re-send the cookie.
    """

    __slots__ = ("_data", "_dirty")

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = data if data is not None else {}
        self._dirty = False

    @property
    def dirty(self) -> bool:
        return self._dirty

    def view(self) -> Mapping[str, str]:
        """Read-only view of the session data."""
        return MappingProxyType(self._data)

    def mutable(self) -> dict[str, str]:
        """The live session dict; marks the session dirty."""
        self._dirty = True
        return self._data

    def regenerate(self) -> dict[str, str]:
        """Discard all session data and return the (now empty) live dict.

        Prevents session fixation: call it when the user logs in or out
        so nothing from the previous session carries over. The fresh
        empty session is written back on the response.
        """
        data = self.mutable()
        data.clear()
        return data

    def __repr__(self) -> str:
        return f"Session({self._data!r}, dirty={self._dirty})"


class RequestContext:
    """Typed per-request slots for the cookie jar and the session."""

    __slots__ = ("_jar", "_session")

    def __init__(self) -> None:
        self._jar: CookieJar | None = None
        self._session: Session | None = None

    # -- Attachment (middleware only) --

    def attach_jar(self, jar: CookieJar) -> None:
        self._jar = jar

    def attach_session(self, session: Session) -> None:
        self._session = session

    # -- Slots --

    @property
    def jar(self) -> CookieJar:
        if self._jar is None:
            msg = (
                "No cookie jar for this request. Ensure CookieMiddleware is "
                "added to the app before anything that reads cookies."
            )
            raise MissingStateError(msg)
        return self._jar

    @property
    def session_state(self) -> Session:
        if self._session is None:
            msg = (
                "No active session. Ensure SessionMiddleware is added "
                "to the app (after CookieMiddleware) before accessing the session."
            )
            raise MissingStateError(msg)
        return self._session

    # -- Handler accessors --

    def cookies(self) -> Mapping[str, Cookie]:
        """Read-only view of the request's cookies by name."""
        return self.jar.view()

    def cookies_mut(self) -> CookieJar:
        """The request's cookie jar, for adding and removing cookies."""
        return self.jar

    def session(self) -> Mapping[str, str]:
        """Read-only session data; does not trigger a cookie rewrite."""
        return self.session_state.view()

    def session_mut(self) -> dict[str, str]:
        """Mutable session data; the session cookie is rewritten on response."""
        return self.session_state.mutable()

    def regenerate_session(self) -> dict[str, str]:
        """Clear the session (login/logout); see ``Session.regenerate``."""
        return self.session_state.regenerate()

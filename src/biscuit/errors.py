"""Biscuit exception hierarchy.

Shared across the app, handler pipeline, and middleware so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class BiscuitError(Exception):
    """Base for all biscuit-specific errors."""


class ConfigurationError(BiscuitError):
    """Raised when app or middleware configuration is invalid.

    Typically raised while constructing middleware at startup.
    """


class MissingStateError(BiscuitError, LookupError):
    """Request-scoped state was read before the middleware that attaches it ran.

    A programming error: the cookie jar and session only exist once
    ``CookieMiddleware`` and ``SessionMiddleware`` have run their ``before``
    hooks. The handler pipeline reports it as a 500.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(BiscuitError):
    """An error that maps directly to an HTTP status code.

    Raised by handlers or middleware. The pipeline turns it into a plain-text
    response with this status; middleware ``after`` hooks do not run.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


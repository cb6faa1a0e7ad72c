"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. The framework checks the shape, not the lineage.

Middleware that only needs to act on the way in and on the way out can
subclass ``HookMiddleware`` and implement ``before`` / ``after`` instead.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from biscuit.http.request import Request
from biscuit.http.response import Response

# The next handler in the middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for biscuit middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(request: Request, next: Next) -> Response:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")

        # Class middleware
        class RateLimiter:
            async def __call__(self, request: Request, next: Next) -> Response:
                ...
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...


class HookMiddleware:
    """Middleware written as a ``before`` / ``after`` hook pair.

    ``before`` runs on the way in. ``after`` runs on the way out and only
    when the inner chain produced a response: if the handler (or an inner
    middleware) raises, the exception propagates unchanged and ``after``
    is skipped, so nothing is attached to a failed request.
    """

    __slots__ = ()

    def before(self, request: Request) -> None:
        """Prepare request-scoped state. Default: nothing."""

    def after(self, request: Request, response: Response) -> Response:
        """Decorate the response. Default: return it unchanged."""
        return response

    async def __call__(self, request: Request, next: Next) -> Response:
        self.before(request)
        response = await next(request)
        return self.after(request, response)

"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    CookieMiddleware -- Per-request cookie jar, emits Set-Cookie for changes
    SessionMiddleware -- Signed cookie sessions (requires CookieMiddleware)
"""

from biscuit.middleware.cookies import CookieMiddleware
from biscuit.middleware.protocol import HookMiddleware, Middleware, Next
from biscuit.middleware.sessions import SessionConfig, SessionMiddleware

__all__ = [
    "CookieMiddleware",
    "HookMiddleware",
    "Middleware",
    "Next",
    "SessionConfig",
    "SessionMiddleware",
]

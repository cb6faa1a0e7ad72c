"""Session middleware — signed cookie sessions with write avoidance.

Session data is a ``str -> str`` map, encoded with
``biscuit.http.session_codec`` and signed through the cookie jar's
signed view (``itsdangerous`` HMAC-SHA256, salted with the cookie name).

The session cookie is only re-signed and re-sent when a handler asked
for write access with ``request.session_mut()``. Requests that only read
the session, or never touch it, leave the response without a session
``Set-Cookie``.

A missing, tampered, or foreign-key session cookie loads as an empty
session. Nothing is raised to the handler.

Requires ``CookieMiddleware``, added before this one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from biscuit.config import AppConfig
from biscuit.context import Session
from biscuit.errors import ConfigurationError
from biscuit.http.cookies import Cookie
from biscuit.http.request import Request
from biscuit.http.response import Response
from biscuit.http.session_codec import decode_session, encode_session
from biscuit.http.signed import SecretKey, normalize_keys
from biscuit.middleware.protocol import HookMiddleware

logger = logging.getLogger("biscuit.sessions")

NINETY_DAYS = 90 * 24 * 60 * 60


# -- Configuration --


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Session middleware configuration.

    ``secret_key`` is required. Sessions are signed, not encrypted. Pass a
    sequence of keys to rotate: the last signs, all verify.

    The cookie is always ``HttpOnly``, ``SameSite=Strict`` and ``Path=/``;
    ``secure`` adds the ``Secure`` attribute.
    """

    secret_key: SecretKey
    cookie_name: str = "session"
    secure: bool = False
    max_age: int = NINETY_DAYS
    domain: str | None = None

    @classmethod
    def from_app_config(cls, config: AppConfig) -> SessionConfig:
        return cls(
            secret_key=config.secret_key,
            cookie_name=config.session_cookie_name,
            secure=config.session_secure,
        )


# -- Middleware --


class SessionMiddleware(HookMiddleware):
    """Signed cookie session middleware.

    Usage::

        from biscuit.middleware import CookieMiddleware, SessionConfig, SessionMiddleware

        app.add_middleware(CookieMiddleware())
        app.add_middleware(SessionMiddleware(SessionConfig(secret_key="my-secret-key")))

        @app.route("/login")
        def login(request):
            request.session_mut()["user"] = "alice"
            return "welcome"

        @app.route("/me")
        def me(request):
            return request.session().get("user", "anonymous")
    """

    __slots__ = ("_config",)

    def __init__(self, config: SessionConfig) -> None:
        normalize_keys(config.secret_key)
        if not config.cookie_name:
            msg = "SessionConfig.cookie_name must not be empty."
            raise ConfigurationError(msg)
        self._config = config

    @property
    def config(self) -> SessionConfig:
        return self._config

    def before(self, request: Request) -> None:
        """Load and verify the session cookie into a clean ``Session``."""
        signed = request.context.jar.signed(self._config.secret_key)
        cookie = signed.get(self._config.cookie_name)
        data = decode_session(cookie.value) if cookie is not None else {}
        request.context.attach_session(Session(data))

    def after(self, request: Request, response: Response) -> Response:
        """Re-sign the session into the jar if it was opened for writing."""
        session = request.context.session_state
        if not session.dirty:
            return response

        cfg = self._config
        cookie = Cookie(
            name=cfg.cookie_name,
            value=encode_session(session.view()),
            max_age=cfg.max_age,
            path="/",
            domain=cfg.domain,
            secure=cfg.secure,
            httponly=True,
            samesite="Strict",
        )
        request.context.jar.signed(cfg.secret_key).add(cookie)
        logger.debug("Session rewritten for %s %s", request.method, request.path)
        return response

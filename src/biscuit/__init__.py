"""Biscuit — signed cookie sessions for ASGI request pipelines.

Parses incoming cookies into a per-request jar, exposes a signed
``str -> str`` session to handlers, and only re-sends the session cookie
when a handler asked to change it.

Basic usage::

    from biscuit import App, AppConfig
    from biscuit.middleware import CookieMiddleware, SessionConfig, SessionMiddleware

    app = App()
    app.add_middleware(CookieMiddleware())
    app.add_middleware(SessionMiddleware(SessionConfig(secret_key="change-me")))

    @app.route("/visit")
    def visit(request):
        session = request.session_mut()
        session["visits"] = str(int(session.get("visits", "0")) + 1)
        return f"Visits: {session['visits']}"
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BiscuitError",
    "ConfigurationError",
    "Cookie",
    "CookieJar",
    "CookieMiddleware",
    "HTTPError",
    "MissingStateError",
    "NotFound",
    "Request",
    "Response",
    "SessionConfig",
    "SessionMiddleware",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import biscuit`` fast while providing a clean top-level API.
    """
    if name == "App":
        from biscuit.app import App

        return App

    if name == "AppConfig":
        from biscuit.config import AppConfig

        return AppConfig

    if name == "Request":
        from biscuit.http.request import Request

        return Request

    if name == "Response":
        from biscuit.http.response import Response

        return Response

    if name == "Cookie":
        from biscuit.http.cookies import Cookie

        return Cookie

    if name == "CookieJar":
        from biscuit.http.jar import CookieJar

        return CookieJar

    if name in ("CookieMiddleware", "SessionConfig", "SessionMiddleware"):
        from biscuit import middleware as _mw

        return getattr(_mw, name)

    if name in (
        "BiscuitError",
        "ConfigurationError",
        "HTTPError",
        "MissingStateError",
        "NotFound",
    ):
        from biscuit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

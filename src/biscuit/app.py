"""The biscuit App — path table, middleware stack, and ASGI entry point."""

from collections.abc import Callable
from typing import Any

from biscuit._internal.asgi import Receive, Scope, Send
from biscuit.config import AppConfig
from biscuit.errors import ConfigurationError
from biscuit.middleware.protocol import Middleware
from biscuit.server.handler import Handler, handle_request


class App:
    """A biscuit application.

    Usage::

        from biscuit import App, AppConfig
        from biscuit.middleware import CookieMiddleware, SessionConfig, SessionMiddleware

        config = AppConfig.from_env()
        app = App(config)
        app.add_middleware(CookieMiddleware())
        app.add_middleware(SessionMiddleware(SessionConfig.from_app_config(config)))

        @app.route("/")
        def index(request):
            return f"Hello, {request.session().get('name', 'stranger')}"

    Handlers are ``def`` or ``async def``, take the request, and return a
    ``Response`` or a ``str`` / ``bytes`` body. Paths match exactly; any
    other path is a 404. ``app`` is an ASGI 3 application.
    """

    __slots__ = ("_middleware", "_routes", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes: dict[str, Handler] = {}
        self._middleware: list[Middleware] = []

    def route(self, path: str) -> Callable[[Handler], Handler]:
        """Register the handler for *path*."""

        def decorator(func: Handler) -> Handler:
            if path in self._routes:
                msg = f"Duplicate route: {path}"
                raise ConfigurationError(msg)
            self._routes[path] = func
            return func

        return decorator

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware to the pipeline.

        The first middleware added is the outermost: it sees the request
        first and the response last.
        """
        self._middleware.append(middleware)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point. Only ``http`` scopes are handled."""
        await handle_request(
            scope,
            receive,
            send,
            routes=self._routes,
            middleware=tuple(self._middleware),
            debug=self.config.debug,
        )

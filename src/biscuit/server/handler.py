"""ASGI handler — one HTTP request through the middleware chain.

The only component that touches raw ASGI messages. Builds the typed
Request, runs the middleware chain around the route handler, and sends
the result. Exceptions from handlers or middleware pass through every
middleware untouched and become error responses here, at the outermost
layer, so a failed request never carries cookies.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from biscuit._internal.asgi import Receive, Scope, Send
from biscuit._internal.invoke import invoke
from biscuit.errors import HTTPError, NotFound
from biscuit.http.request import Request
from biscuit.http.response import Response
from biscuit.middleware.protocol import Next
from biscuit.server.sender import encode_response

logger = logging.getLogger("biscuit.server")

Handler: TypeAlias = Callable[[Request], Any]


def build_chain(middleware: tuple[Callable[..., Any], ...], dispatch: Next) -> Next:
    """Wrap *dispatch* in *middleware*, first entry outermost.

    ``before`` work therefore runs outer-to-inner and ``after`` work
    inner-to-outer.
    """
    handler = dispatch
    for mw in reversed(middleware):

        async def call(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = call
    return handler


def _to_response(value: Any) -> Response:
    if isinstance(value, Response):
        return value
    if isinstance(value, (str, bytes)):
        return Response(body=value)
    msg = f"Handlers must return Response, str or bytes, not {type(value).__name__}"
    raise TypeError(msg)


def _error_response(exc: Exception, request: Request, debug: bool) -> Response:
    if isinstance(exc, HTTPError):
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
        return Response(
            body=exc.detail or f"Error {exc.status}",
            status=exc.status,
            content_type="text/plain; charset=utf-8",
        )

    logger.exception("500 %s %s", request.method, request.path)
    body = "Internal Server Error"
    if debug:
        body = f"{body}\n\n{type(exc).__name__}: {exc}"
    return Response(body=body, status=500, content_type="text/plain; charset=utf-8")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: dict[str, Handler],
    middleware: tuple[Callable[..., Any], ...],
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    async def dispatch(req: Request) -> Response:
        handler = routes.get(req.path)
        if handler is None:
            raise NotFound
        return _to_response(await invoke(handler, req))

    try:
        messages = encode_response(await build_chain(middleware, dispatch)(request))
    except Exception as exc:
        messages = encode_response(_error_response(exc, request, debug))

    for message in messages:
        await send(message)

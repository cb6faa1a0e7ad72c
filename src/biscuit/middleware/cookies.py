"""Cookie middleware — per-request cookie jar.

Parses every ``Cookie`` header into a fresh ``CookieJar`` before the
handler runs, and turns the jar's delta into ``Set-Cookie`` headers
afterwards. Cookies the request arrived with and nobody touched produce
no header.

Usage::

    from biscuit.middleware import CookieMiddleware

    app.add_middleware(CookieMiddleware())

    @app.route("/theme")
    def theme(request):
        request.cookies_mut().add(Cookie("theme", "dark", path="/"))
        return "ok"
"""

from biscuit.http.cookies import Cookie, parse_cookie_headers
from biscuit.http.jar import CookieJar
from biscuit.http.request import Request
from biscuit.http.response import Response
from biscuit.middleware.protocol import HookMiddleware


class CookieMiddleware(HookMiddleware):
    """Attach a ``CookieJar`` to each request and emit its delta.

    Add it before any middleware that reads or writes cookies (it must be
    the outer one), including ``SessionMiddleware``.
    """

    __slots__ = ()

    def before(self, request: Request) -> None:
        jar = CookieJar()
        for name, value in parse_cookie_headers(request.headers.get_raw_list("cookie")):
            jar.add_original(Cookie(name, value))
        request.context.attach_jar(jar)

    def after(self, request: Request, response: Response) -> Response:
        for cookie in request.context.jar.delta():
            response = response.with_header("Set-Cookie", cookie.to_header_value())
        return response

"""Tests for CookieMiddleware — jar population and Set-Cookie emission."""

import pytest

from biscuit.app import App
from biscuit.http.cookies import Cookie
from biscuit.middleware import CookieMiddleware
from biscuit.testing import TestClient


def _make_app() -> App:
    app = App()
    app.add_middleware(CookieMiddleware())
    return app


class TestRequestCookies:
    async def test_request_headers(self) -> None:
        app = _make_app()

        @app.route("/articles")
        def articles(request):
            assert request.cookies().get("foo") is not None
            return request.cookies()["foo"].value

        async with TestClient(app) as client:
            response = await client.get("/articles", headers={"Cookie": "foo=bar"})

        assert response.status == 200
        assert response.text == "bar"
        assert response.set_cookies == []

    async def test_multiple_cookie_headers(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            return ",".join(sorted(request.cookies()))

        async with TestClient(app) as client:
            response = await client.get(
                "/", headers=[("Cookie", "a=1; b=2"), ("Cookie", "c=3")]
            )

        assert response.text == "a,b,c"

    async def test_non_utf8_header_skipped(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            return ",".join(sorted(request.cookies()))

        async with TestClient(app) as client:
            response = await client.get(
                "/", headers=[("Cookie", b"bad=\xff\xfe"), ("Cookie", "good=1")]
            )

        assert response.status == 200
        assert response.text == "good"

    async def test_no_cookie_header(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            return f"count={len(request.cookies())}"

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.text == "count=0"
        assert response.set_cookies == []

    async def test_cookies_view_is_read_only(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            with pytest.raises(TypeError):
                request.cookies()["x"] = Cookie("x", "y")
            return "ok"

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.text == "ok"


class TestSetCookie:
    async def test_set_cookie(self) -> None:
        app = _make_app()

        @app.route("/articles")
        def articles(request):
            request.cookies_mut().add(Cookie("foo", "bar"))
            return "ok"

        async with TestClient(app) as client:
            response = await client.get("/articles")

        assert response.set_cookies == ["foo=bar"]

    async def test_cookie_list(self) -> None:
        """Each changed cookie is its own Set-Cookie header."""
        app = _make_app()

        @app.route("/articles")
        def articles(request):
            request.cookies_mut().add(Cookie("foo", "bar"))
            request.cookies_mut().add(Cookie("baz", "qux"))
            return "ok"

        async with TestClient(app) as client:
            response = await client.get("/articles")

        assert sorted(response.set_cookies) == ["baz=qux", "foo=bar"]

    async def test_unchanged_cookie_not_resent(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            request.cookies_mut().add(Cookie("foo", "bar"))
            return "ok"

        async with TestClient(app) as client:
            response = await client.get("/", headers={"Cookie": "foo=bar"})

        assert response.set_cookies == []

    async def test_removed_cookie_expires(self) -> None:
        app = _make_app()

        @app.route("/logout")
        def logout(request):
            request.cookies_mut().remove("foo")
            return "bye"

        async with TestClient(app) as client:
            response = await client.get("/logout", headers={"Cookie": "foo=bar; keep=1"})

        assert response.set_cookies == ["foo=; Max-Age=0"]

    async def test_attributes_serialized(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            request.cookies_mut().add(
                Cookie("theme", "dark", path="/", secure=True, samesite="Lax")
            )
            return "ok"

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.set_cookies == ["theme=dark; Path=/; Secure; SameSite=Lax"]


class TestFailures:
    async def test_handler_error_attaches_no_cookies(self) -> None:
        app = _make_app()

        @app.route("/")
        def index(request):
            request.cookies_mut().add(Cookie("foo", "bar"))
            raise RuntimeError("boom")

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.status == 500
        assert response.set_cookies == []

    async def test_cookies_without_middleware_is_programming_error(self) -> None:
        app = App()

        @app.route("/")
        def index(request):
            return str(len(request.cookies()))

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.status == 500

"""Tests for biscuit.context — Session dirty tracking and RequestContext slots."""

import pytest

from biscuit.context import RequestContext, Session
from biscuit.errors import MissingStateError
from biscuit.http.cookies import Cookie
from biscuit.http.jar import CookieJar


class TestSession:
    def test_starts_clean(self) -> None:
        session = Session({"a": "1"})
        assert session.dirty is False
        assert session.view() == {"a": "1"}

    def test_view_does_not_mark_dirty(self) -> None:
        session = Session({"a": "1"})
        _ = session.view()["a"]
        assert session.dirty is False

    def test_view_is_read_only(self) -> None:
        session = Session()
        with pytest.raises(TypeError):
            session.view()["a"] = "1"  # type: ignore[index]

    def test_mutable_marks_dirty_without_change(self) -> None:
        session = Session({"a": "1"})
        session.mutable()
        assert session.dirty is True
        assert session.view() == {"a": "1"}

    def test_mutable_changes_are_visible(self) -> None:
        session = Session()
        session.mutable()["a"] = "1"
        assert session.view() == {"a": "1"}

    def test_regenerate_clears_and_marks_dirty(self) -> None:
        session = Session({"user": "alice", "role": "admin"})
        data = session.regenerate()
        assert data == {}
        assert session.view() == {}
        assert session.dirty is True


class TestRequestContext:
    def test_missing_jar_raises(self) -> None:
        ctx = RequestContext()
        with pytest.raises(MissingStateError, match="CookieMiddleware"):
            ctx.cookies()

    def test_missing_session_raises(self) -> None:
        ctx = RequestContext()
        with pytest.raises(LookupError, match="No active session"):
            ctx.session()
        with pytest.raises(MissingStateError):
            ctx.session_mut()

    def test_cookie_accessors(self) -> None:
        ctx = RequestContext()
        jar = CookieJar()
        jar.add_original(Cookie("foo", "bar"))
        ctx.attach_jar(jar)

        assert ctx.cookies()["foo"].value == "bar"
        assert ctx.cookies_mut() is jar

    def test_session_accessors(self) -> None:
        ctx = RequestContext()
        ctx.attach_session(Session({"a": "1"}))

        assert ctx.session() == {"a": "1"}
        assert ctx.session_state.dirty is False
        ctx.session_mut()["b"] = "2"
        assert ctx.session_state.dirty is True
        assert ctx.session() == {"a": "1", "b": "2"}

    def test_regenerate_session(self) -> None:
        ctx = RequestContext()
        ctx.attach_session(Session({"a": "1"}))
        ctx.regenerate_session()
        assert ctx.session() == {}
        assert ctx.session_state.dirty is True

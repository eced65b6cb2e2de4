"""Tests for crumb.http.response — Response chaining and header access."""

from crumb.cookie import Cookie
from crumb.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        r = Response().with_status(201)
        assert r.status == 201

    def test_with_header(self) -> None:
        r = Response().with_header("X-Custom", "value")
        assert r.headers == (("X-Custom", "value"),)

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_with_headers_dict(self) -> None:
        r = Response().with_headers({"A": "1", "B": "2"})
        assert ("A", "1") in r.headers
        assert ("B", "2") in r.headers

    def test_with_content_type(self) -> None:
        r = Response().with_content_type("application/json")
        assert r.content_type == "application/json"

    def test_with_cookie(self) -> None:
        cookie = Cookie("session", "abc123")
        r = Response().with_cookie(cookie)
        assert r.headers == (("Set-Cookie", str(cookie)),)

    def test_without_header_is_case_insensitive(self) -> None:
        r = (
            Response()
            .with_header("Set-Cookie", "a=1")
            .with_header("X-Keep", "yes")
            .with_header("SET-COOKIE", "b=2")
        )
        assert r.without_header("set-cookie").headers == (("X-Keep", "yes"),)

    def test_without_missing_header_returns_same_response(self) -> None:
        r = Response().with_header("X-Keep", "yes")
        assert r.without_header("Set-Cookie") is r

    def test_get_header(self) -> None:
        r = Response().with_header("Set-Cookie", "a=1").with_header("set-cookie", "b=2")
        assert r.get_header("SET-COOKIE") == "a=1"
        assert r.get_header("X-Missing") is None
        assert r.get_header("X-Missing", "fallback") == "fallback"
        assert r.get_header_list("Set-Cookie") == ["a=1", "b=2"]

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response("hello")
        r2 = r1.with_status(201)
        r3 = r2.with_header("X-Foo", "bar")

        assert r1.status == 200
        assert r2.status == 201
        assert r2.headers == ()
        assert r3.headers == (("X-Foo", "bar"),)

    def test_body_bytes_from_str(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()

    def test_text_from_bytes(self) -> None:
        assert Response(b"hello").text == "hello"

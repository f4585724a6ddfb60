"""Tests for message views."""

import httpx

from hxprint.models.content_type import ContentType
from hxprint.models.messages import RequestView, ResponseView


class TestRequestView:
    """Tests for RequestView."""

    def test_basic_fields(self) -> None:
        """Test method, URL and version."""
        view = RequestView(httpx.Request("GET", "http://example.com/a?b=1"))

        assert view.method == "GET"
        assert view.url.path == "/a"
        assert view.version == "HTTP/1.1"

    def test_body_materialized(self) -> None:
        """Test that a bytes body is exposed."""
        view = RequestView(httpx.Request("POST", "http://example.com", content=b"data"))
        assert view.body == b"data"

    def test_empty_body_is_none(self) -> None:
        """Test that an empty body counts as no body."""
        view = RequestView(httpx.Request("GET", "http://example.com"))
        assert view.body is None

    def test_streaming_body_is_none(self) -> None:
        """Test that an unread streaming body is not exposed."""
        request = httpx.Request("POST", "http://example.com", content=iter([b"a", b"b"]))
        assert RequestView(request).body is None

    def test_headers_keep_case_and_order(self) -> None:
        """Test that headers are reported as sent."""
        request = httpx.Request(
            "GET",
            "http://example.com",
            headers=[("X-Second", "2"), ("x-first", "1")],
        )
        headers = RequestView(request).headers

        assert ("X-Second", b"2") in headers
        assert ("x-first", b"1") in headers
        assert headers.index(("X-Second", b"2")) < headers.index(("x-first", b"1"))

    def test_content_type(self) -> None:
        """Test content type detection."""
        request = httpx.Request(
            "POST",
            "http://example.com",
            headers={"Content-Type": "multipart/form-data; boundary=x"},
        )
        assert RequestView(request).content_type is ContentType.MULTIPART

    def test_implicit_headers_hidden(self) -> None:
        """Test that headers added at build time can be hidden."""
        request = httpx.Request(
            "POST",
            "http://example.com",
            headers={"X-Token": "t"},
            content=b"data",
        )
        view = RequestView(request, implicit=["host", "Content-Length"])

        assert view.headers == [("X-Token", b"t")]
        assert view.body == b"data"


class TestResponseView:
    """Tests for ResponseView."""

    def test_status(self) -> None:
        """Test the status with its reason phrase."""
        view = ResponseView(httpx.Response(404))

        assert view.version == "HTTP/1.1"
        assert view.status == "404 Not Found"

    def test_unknown_status(self) -> None:
        """Test a status code without a standard reason."""
        assert ResponseView(httpx.Response(599)).status == "599 <unknown status code>"

    def test_encoding(self) -> None:
        """Test the declared charset."""
        response = httpx.Response(200, headers={"Content-Type": "text/plain; charset=latin-1"})
        assert ResponseView(response).encoding == "latin-1"

    def test_read_and_stream(self) -> None:
        """Test materialized and streamed access to the body."""
        assert ResponseView(httpx.Response(200, content=b"abc")).read() == b"abc"

        streamed = ResponseView(httpx.Response(200, content=iter([b"a", b"bc"])))
        assert b"".join(streamed.iter_bytes()) == b"abc"

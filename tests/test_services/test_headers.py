"""Tests for header formatting."""

import httpx

from hxprint.models.messages import RequestView, ResponseView
from hxprint.services.headers import (
    TEST_MODE_HOST,
    complete_request_headers,
    format_header_value,
    format_headers,
    request_line,
    status_line,
)


def _bare_request(method: str, url: str, **kwargs: object) -> httpx.Request:
    """Build a request without the headers httpx adds on its own."""
    request = httpx.Request(method, url, **kwargs)  # type: ignore[arg-type]
    for name in ("Host", "Content-Length"):
        if name in request.headers:
            del request.headers[name]
    return request


class TestFormatHeaders:
    """Tests for format_headers."""

    def test_sorted(self) -> None:
        """Test ordering by header name."""
        headers = [("Zeta", b"1"), ("Alpha", b"2")]
        assert format_headers(headers, sort=True) == "Alpha: 2\nZeta: 1"

    def test_unsorted_keeps_order(self) -> None:
        """Test that insertion order is kept without sorting."""
        headers = [("Zeta", b"1"), ("Alpha", b"2")]
        assert format_headers(headers, sort=False) == "Zeta: 1\nAlpha: 2"

    def test_sort_is_stable_for_repeated_names(self) -> None:
        """Test that repeated headers keep their relative order."""
        headers = [("set-cookie", b"b=2"), ("date", b"x"), ("set-cookie", b"a=1")]
        assert format_headers(headers, sort=True) == "date: x\nset-cookie: b=2\nset-cookie: a=1"

    def test_empty(self) -> None:
        """Test that no headers give an empty string."""
        assert format_headers([], sort=True) == ""


class TestFormatHeaderValue:
    """Tests for format_header_value."""

    def test_visible_ascii(self) -> None:
        """Test that printable values are shown verbatim."""
        assert format_header_value(b"text/html; q=0.9\tx") == "text/html; q=0.9\tx"

    def test_non_ascii_is_escaped(self) -> None:
        """Test that other bytes are escaped instead of dropped."""
        assert format_header_value("café".encode()) == '"caf\\xc3\\xa9"'

    def test_quotes_escaped_in_debug_form(self) -> None:
        """Test that quotes are escaped once the value needs quoting."""
        assert format_header_value(b'a"\x01') == '"a\\"\\x1"'


class TestCompleteRequestHeaders:
    """Tests for complete_request_headers."""

    def test_adds_missing_headers(self) -> None:
        """Test that Content-Length and Host are synthesized."""
        request = _bare_request("POST", "http://example.com:8080/x", content=b"hello")

        headers = complete_request_headers(RequestView(request))

        assert headers == [("Content-Length", b"5"), ("Host", b"example.com:8080")]

    def test_default_port_omitted(self) -> None:
        """Test that the scheme's default port is not shown."""
        request = _bare_request("GET", "https://example.com:443/")

        headers = complete_request_headers(RequestView(request))

        assert headers == [("Host", b"example.com")]

    def test_test_mode_host(self) -> None:
        """Test the fixed Host used for deterministic output."""
        request = _bare_request("GET", "http://example.com/")

        headers = complete_request_headers(RequestView(request), test_mode=True)

        assert headers == [("Host", TEST_MODE_HOST.encode())]

    def test_existing_headers_not_overwritten(self) -> None:
        """Test that declared headers win, whatever their case."""
        request = httpx.Request(
            "POST",
            "http://example.com/",
            headers=[("host", "other.example"), ("content-length", "99")],
            content=b"hello",
        )

        headers = complete_request_headers(RequestView(request))

        assert [name for name, _ in headers if name.lower() == "host"] == ["host"]
        assert ("host", b"other.example") in headers
        assert ("content-length", b"99") in headers

    def test_no_content_length_without_body(self) -> None:
        """Test that only a materialized body gets a Content-Length."""
        request = _bare_request("GET", "http://example.com/")

        headers = complete_request_headers(RequestView(request))

        assert all(name != "Content-Length" for name, _ in headers)


class TestStartLines:
    """Tests for request and status lines."""

    def test_request_line_with_query(self) -> None:
        """Test the request line includes the query string."""
        request = RequestView(httpx.Request("GET", "http://example.com/search?q=a%20b"))
        assert request_line(request) == "GET /search?q=a%20b HTTP/1.1"

    def test_request_line_root(self) -> None:
        """Test the request line for the root path."""
        request = RequestView(httpx.Request("DELETE", "http://example.com"))
        assert request_line(request) == "DELETE / HTTP/1.1"

    def test_status_line(self) -> None:
        """Test the status line."""
        assert status_line(ResponseView(httpx.Response(201))) == "HTTP/1.1 201 Created"

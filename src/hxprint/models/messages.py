"""Views over httpx requests and responses."""

from collections.abc import Iterable, Iterator

import httpx

from hxprint.models.content_type import (
    ContentType,
    charset_from_content_type,
    detect_content_type,
)

# Header pairs as sent on the wire: (name, raw value)
HeaderList = list[tuple[str, bytes]]


def _header_list(headers: httpx.Headers) -> HeaderList:
    return [(name.decode("latin-1"), value) for name, value in headers.raw]


class RequestView:
    """A :class:`httpx.Request` wrapper.

    httpx attaches some headers when the request is built rather than when
    it is sent. Names listed in ``implicit`` are hidden from :attr:`headers`
    so they can be reported the way a sending client would add them.
    """

    version = "HTTP/1.1"

    def __init__(self, request: httpx.Request, implicit: Iterable[str] = ()):
        self._orig = request
        self._implicit = frozenset(name.lower() for name in implicit)

    @property
    def method(self) -> str:
        return self._orig.method

    @property
    def url(self) -> httpx.URL:
        return self._orig.url

    @property
    def headers(self) -> HeaderList:
        return [
            (name, value)
            for name, value in _header_list(self._orig.headers)
            if name.lower() not in self._implicit
        ]

    @property
    def content_type(self) -> ContentType:
        return detect_content_type(self._orig.headers)

    @property
    def body(self) -> bytes | None:
        """The request body, if it has already been materialized.

        Streaming uploads have not been read yet and empty bodies count
        as no body at all.
        """
        try:
            content = self._orig.content
        except httpx.RequestNotRead:
            return None
        return content or None


class ResponseView:
    """A :class:`httpx.Response` wrapper."""

    def __init__(self, response: httpx.Response):
        self._orig = response

    @property
    def version(self) -> str:
        return self._orig.http_version

    @property
    def status(self) -> str:
        """Status code and reason phrase, e.g. ``200 OK``."""
        code = self._orig.status_code
        reason = self._orig.reason_phrase or httpx.codes.get_reason_phrase(code)
        return f"{code} {reason or '<unknown status code>'}"

    @property
    def headers(self) -> HeaderList:
        return _header_list(self._orig.headers)

    @property
    def content_type(self) -> ContentType:
        return detect_content_type(self._orig.headers)

    @property
    def encoding(self) -> str | None:
        """Charset declared by the server, if any."""
        return charset_from_content_type(self._orig.headers)

    def read(self) -> bytes:
        """Materialize the whole body."""
        return self._orig.read()

    def iter_bytes(self) -> Iterator[bytes]:
        """Stream the body chunk by chunk, without materializing it."""
        return self._orig.iter_bytes()

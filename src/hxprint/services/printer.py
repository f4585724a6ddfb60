"""Printer service for request and response output."""

from hxprint.models.content_type import ContentType
from hxprint.models.messages import RequestView, ResponseView
from hxprint.models.output import Pretty, RenderMode, Theme, debug_log
from hxprint.services.body import BodyRenderer, StreamBody, TextBody
from hxprint.services.buffer import Buffer
from hxprint.services.decoder import StreamDecoder, decode_lossy
from hxprint.services.headers import (
    complete_request_headers,
    format_headers,
    request_line,
    status_line,
)

MULTIPART_SUPPRESSOR = (
    "+--------------------------------------------+\n"
    "| NOTE: multipart data not shown in terminal |\n"
    "+--------------------------------------------+\n"
    "\n"
)

BINARY_SUPPRESSOR = (
    "+-----------------------------------------+\n"
    "| NOTE: binary data not shown in terminal |\n"
    "+-----------------------------------------+\n"
    "\n"
)


class Printer:
    """Print requests and responses to a buffer.

    A printer is built once per invocation and prints one request and one
    response. Headers are always written completely before the body.
    """

    def __init__(
        self,
        buffer: Buffer,
        pretty: Pretty | None = None,
        theme: Theme | None = None,
        stream: bool = False,
        test_mode: bool = False,
        debug: bool = False,
    ):
        if pretty is None:
            pretty = Pretty.default_for(buffer.is_terminal())
        self.buffer = buffer
        self.mode = RenderMode.from_pretty(pretty, stream)
        self.theme = theme or Theme.AUTO
        self.test_mode = test_mode
        self.debug = debug
        self._renderer = BodyRenderer(buffer, self.mode, self.theme)

    @property
    def color(self) -> bool:
        return self.mode.color

    def _print_headers(self, text: str) -> None:
        if self.mode.color:
            self._renderer.with_highlighter("http", lambda h: h.highlight(text))
        else:
            self.buffer.print(text)
        self.buffer.print("\n\n")

    def print_request_headers(self, request: RequestView) -> None:
        """Print the request line and headers, including implicit ones."""
        headers = complete_request_headers(request, test_mode=self.test_mode)
        text = request_line(request) + "\n" + format_headers(headers, self.mode.sort_headers)
        self._print_headers(text)

    def print_response_headers(self, response: ResponseView) -> None:
        """Print the status line and headers."""
        text = (
            status_line(response)
            + "\n"
            + format_headers(response.headers, self.mode.sort_headers)
        )
        self._print_headers(text)

    def print_request_body(self, request: RequestView) -> None:
        """Print the request body if it is printable text.

        Multipart bodies are replaced by a notice. Bodies that are not
        materialized, contain NUL bytes, or are not UTF-8 are skipped.
        """
        content_type = request.content_type
        if content_type is ContentType.MULTIPART:
            self.buffer.print(MULTIPART_SUPPRESSOR)
            return

        # TODO: decide whether binary request bodies should get BINARY_SUPPRESSOR
        body = request.body
        if body is None or b"\0" in body:
            debug_log("request body: nothing printable", self.debug)
            return
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            debug_log("request body: not valid UTF-8, skipped", self.debug)
            return

        self._renderer.render(content_type, TextBody(text))
        self.buffer.print("\n")

    def print_response_body(self, response: ResponseView) -> None:
        """Print the response body.

        Redirected output gets the body bytes unchanged. Terminal output is
        decoded to UTF-8, either incrementally when streaming or all at once,
        in which case binary bodies are replaced by a notice.
        """
        content_type = response.content_type

        if not self.buffer.is_terminal():
            # No trailing newline, no binary detection, no decoding
            debug_log(f"response body: passthrough ({content_type.value})", self.debug)
            self._renderer.render(content_type, StreamBody(response.iter_bytes()))
        elif self.mode.force_stream:
            debug_log(f"response body: streaming ({content_type.value})", self.debug)
            decoder = StreamDecoder(response.iter_bytes(), response.encoding)
            self._renderer.render(content_type, StreamBody(decoder))
            self.buffer.print("\n")
        else:
            text = decode_lossy(response.read(), response.encoding)
            if "\0" in text:
                debug_log("response body: binary, suppressed", self.debug)
                self.buffer.print(BINARY_SUPPRESSOR)
                return
            debug_log(f"response body: buffered ({content_type.value})", self.debug)
            self._renderer.render(content_type, TextBody(text))
            self.buffer.print("\n")

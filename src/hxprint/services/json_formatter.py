"""Streaming JSON reformatter.

Only whitespace outside of strings is touched, so the formatter works on
raw bytes one chunk at a time and never needs the whole document. It does
not validate: malformed input comes out reformatted on a best-effort basis.
"""

import io
from collections.abc import Callable, Iterable

_WHITESPACE = frozenset(b" \t\r\n")
_OPEN = frozenset(b"{[")
_CLOSE = frozenset(b"}]")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_COMMA = ord(",")
_COLON = ord(":")


class _FormatState:
    """Tokenizer state carried across chunk boundaries."""

    def __init__(self, indent: bytes):
        self.indent = indent
        self.depth = 0
        self.in_string = False
        self.escaped = False
        self.in_scalar = False
        # Just opened a container; an immediate close keeps it on one line
        self.pending_open = False
        # A top-level value ended; the next one starts on a new line
        self.need_separator = False

    def _newline(self) -> bytes:
        return b"\n" + self.indent * self.depth

    def feed(self, chunk: bytes) -> bytes:
        out = bytearray()
        for c in chunk:
            if self.in_string:
                out.append(c)
                if self.escaped:
                    self.escaped = False
                elif c == _BACKSLASH:
                    self.escaped = True
                elif c == _QUOTE:
                    self.in_string = False
                    if self.depth == 0:
                        self.need_separator = True
                continue

            if c in _WHITESPACE:
                if self.in_scalar:
                    self.in_scalar = False
                    if self.depth == 0:
                        self.need_separator = True
                continue

            self.in_scalar = False

            if c in _CLOSE:
                self.depth = max(self.depth - 1, 0)
                if self.pending_open:
                    self.pending_open = False
                else:
                    out += self._newline()
                out.append(c)
                if self.depth == 0:
                    self.need_separator = True
                continue

            if self.pending_open:
                self.pending_open = False
                out += self._newline()
            elif self.need_separator:
                self.need_separator = False
                out += b"\n"

            if c in _OPEN:
                out.append(c)
                self.depth += 1
                self.pending_open = True
            elif c == _COMMA:
                out.append(c)
                out += self._newline()
            elif c == _COLON:
                out += b": "
            elif c == _QUOTE:
                out.append(c)
                self.in_string = True
            else:
                out.append(c)
                self.in_scalar = True

        return bytes(out)


class JsonFormatter:
    """Reindent JSON read from a byte stream."""

    def __init__(self, indent: str = "    "):
        self.indent = indent.encode("ascii")

    def format_stream(
        self,
        chunks: Iterable[bytes],
        write: Callable[[bytes], object],
    ) -> None:
        """Reformat ``chunks``, passing output to ``write`` as it is produced.

        Args:
            chunks: The JSON source, in arbitrary pieces
            write: Receives reformatted bytes
        """
        state = _FormatState(self.indent)
        for chunk in chunks:
            out = state.feed(chunk)
            if out:
                write(out)

    def format_bytes(self, data: bytes) -> bytes:
        """Reformat a complete document held in memory."""
        buf = io.BytesIO()
        self.format_stream([data], buf.write)
        return buf.getvalue()


def get_json_formatter() -> JsonFormatter:
    """Return the formatter used for JSON bodies."""
    return JsonFormatter()

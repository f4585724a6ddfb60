"""Syntax highlighting with Pygments."""

import re

import pygments
import pygments.lexer
import pygments.token
from pygments.formatters.terminal256 import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from hxprint.models.output import Theme
from hxprint.services.buffer import Buffer

# Written once a highlighted section is complete
RESET = "\x1b[0m"

FALLBACK_STYLE = "monokai"

# Characters the lexers would rewrite or drop
_VERBATIM = re.compile(r"(\r|\ufeff)")


class HTTPLexer(pygments.lexer.RegexLexer):
    """Lexer for a request/status line followed by header lines."""

    name = "HTTP"
    aliases = ["http"]
    tokens = {
        "root": [
            # Request line
            (
                r"([A-Z]+)( +)([^ ]+)( +)(HTTP)(/)(\d+(?:\.\d+)?)",
                pygments.lexer.bygroups(
                    pygments.token.Name.Function,
                    pygments.token.Text,
                    pygments.token.Name.Namespace,
                    pygments.token.Text,
                    pygments.token.Keyword.Reserved,
                    pygments.token.Operator,
                    pygments.token.Number,
                ),
            ),
            # Status line
            (
                r"(HTTP)(/)(\d+(?:\.\d+)?)( +)(\d{3})( *)(.*)",
                pygments.lexer.bygroups(
                    pygments.token.Keyword.Reserved,
                    pygments.token.Operator,
                    pygments.token.Number,
                    pygments.token.Text,
                    pygments.token.Number,
                    pygments.token.Text,
                    pygments.token.Name.Exception,
                ),
            ),
            # Header
            (
                r"(.*?)( *)(:)( *)(.*)",
                pygments.lexer.bygroups(
                    pygments.token.Name.Attribute,
                    pygments.token.Text,
                    pygments.token.Operator,
                    pygments.token.Text,
                    pygments.token.String,
                ),
            ),
        ]
    }


def get_lexer(syntax: str) -> Lexer:
    """Get a lexer that leaves leading and trailing newlines alone."""
    if syntax == "http":
        return HTTPLexer(stripnl=False, ensurenl=False)
    return get_lexer_by_name(syntax, stripnl=False, ensurenl=False)


def get_formatter(theme: Theme) -> Terminal256Formatter:
    """Get a terminal formatter for a theme."""
    try:
        style = get_style_by_name(theme.style_name)
    except ClassNotFound:
        style = get_style_by_name(FALLBACK_STYLE)
    return Terminal256Formatter(style=style)


class Highlighter:
    """A highlighting session writing to a buffer.

    The session has the buffer to itself until :meth:`finish` is called,
    which must happen exactly once, after the last write.
    """

    def __init__(self, syntax: str, theme: Theme, buffer: Buffer):
        self.syntax = syntax
        self.buffer = buffer
        self._lexer = get_lexer(syntax)
        self._formatter = get_formatter(theme)
        self._partial_line = bytearray()

    def highlight(self, text: str) -> None:
        """Highlight a complete piece of text.

        Pygments rewrites ``\\r`` as ``\\n`` and drops a leading U+FEFF while
        lexing, so those characters are written around the lexed pieces
        unchanged.
        """
        for piece in _VERBATIM.split(text):
            if not piece:
                continue
            if _VERBATIM.fullmatch(piece):
                self.buffer.print(piece)
            else:
                self.buffer.print(pygments.highlight(piece, self._lexer, self._formatter))

    def linewise(self) -> "LineWriter":
        """Get a writer that highlights bytes as complete lines arrive."""
        return LineWriter(self)

    def _write_bytes(self, data: bytes) -> None:
        end = data.rfind(b"\n") + 1
        if not end:
            self._partial_line += data
            return
        # All complete lines of a write are lexed together
        self._partial_line += data[:end]
        lines = self._partial_line.decode("utf-8", errors="replace")
        self._partial_line = bytearray(data[end:])
        self.highlight(lines)

    def finish(self) -> None:
        """Flush any unterminated line and reset the terminal colors."""
        if self._partial_line:
            self.highlight(self._partial_line.decode("utf-8", errors="replace"))
            self._partial_line = bytearray()
        self.buffer.print(RESET)


class LineWriter:
    """File-like adapter feeding a :class:`Highlighter` with raw bytes."""

    def __init__(self, highlighter: Highlighter):
        self._highlighter = highlighter

    def write(self, data: bytes) -> int:
        self._highlighter._write_bytes(data)
        return len(data)

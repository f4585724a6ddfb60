"""Body rendering by content type."""

import io
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from hxprint.models.content_type import ContentType
from hxprint.models.output import RenderMode, Theme
from hxprint.services.buffer import Buffer
from hxprint.services.highlighter import Highlighter
from hxprint.services.json_formatter import get_json_formatter


@dataclass(frozen=True)
class TextBody:
    """A body that has been fully read and decoded."""

    text: str
    buffered = True

    def chunks(self) -> Iterator[bytes]:
        yield self.text.encode("utf-8")


@dataclass(frozen=True)
class StreamBody:
    """A body that is still being read."""

    source: Iterable[bytes]
    buffered = False

    def chunks(self) -> Iterator[bytes]:
        return iter(self.source)


Body = TextBody | StreamBody


class BodyRenderer:
    """Render message bodies to a buffer according to a render mode."""

    def __init__(self, buffer: Buffer, mode: RenderMode, theme: Theme = Theme.AUTO):
        self.buffer = buffer
        self.mode = mode
        self.theme = theme
        self._json_strategies: dict[tuple[bool, bool], Callable[[Body], None]] = {
            # (color, buffered)
            (False, True): self._json_to_buffer,
            (False, False): self._json_to_buffer,
            (True, True): self._json_reformat_then_highlight,
            (True, False): self._json_into_highlighter,
        }

    def with_highlighter(self, syntax: str, code: Callable[[Highlighter], None]) -> None:
        """Run ``code`` with a highlighter, then finish the highlighter.

        ``finish`` only runs if ``code`` succeeds; an exception propagates
        with the session left unfinished.
        """
        highlighter = Highlighter(syntax, self.theme, self.buffer)
        code(highlighter)
        highlighter.finish()

    def render(self, content_type: ContentType, body: Body) -> None:
        """Render a body of the given content type."""
        match content_type:
            case ContentType.JSON:
                self._render_json(body)
            case ContentType.XML:
                self._render_syntax(body, "xml")
            case ContentType.HTML:
                self._render_syntax(body, "html")
            case ContentType.MULTIPART | ContentType.OTHER:
                self._render_raw(body)

    def _render_raw(self, body: Body) -> None:
        if isinstance(body, TextBody):
            self.buffer.print(body.text)
        else:
            for chunk in body.chunks():
                self.buffer.write(chunk)

    def _render_syntax(self, body: Body, syntax: str) -> None:
        if not self.mode.color:
            self._render_raw(body)
        elif isinstance(body, TextBody):
            self.with_highlighter(syntax, lambda h: h.highlight(body.text))
        else:
            self.with_highlighter(syntax, lambda h: _copy(body.chunks(), h.linewise().write))

    def _render_json(self, body: Body) -> None:
        if not self.mode.indent_json:
            # Nothing JSON-specific to do, use the generic path
            self._render_syntax(body, "json")
            return
        strategy = self._json_strategies[(self.mode.color, body.buffered)]
        strategy(body)

    def _json_to_buffer(self, body: Body) -> None:
        get_json_formatter().format_stream(body.chunks(), self.buffer.write)

    def _json_reformat_then_highlight(self, body: Body) -> None:
        buf = io.BytesIO()
        get_json_formatter().format_stream(body.chunks(), buf.write)
        # Reformatting only moves whitespace, so this is valid UTF-8 already
        text = buf.getvalue().decode("utf-8", errors="replace")
        self.with_highlighter("json", lambda h: h.highlight(text))

    def _json_into_highlighter(self, body: Body) -> None:
        self.with_highlighter(
            "json",
            lambda h: get_json_formatter().format_stream(body.chunks(), h.linewise().write),
        )


def _copy(chunks: Iterable[bytes], write: Callable[[bytes], object]) -> None:
    for chunk in chunks:
        write(chunk)

"""Service layer for rendering HTTP messages."""

from hxprint.services.body import BodyRenderer
from hxprint.services.buffer import Buffer, BufferKind
from hxprint.services.decoder import StreamDecoder
from hxprint.services.highlighter import Highlighter
from hxprint.services.json_formatter import JsonFormatter
from hxprint.services.printer import Printer

__all__ = [
    "BodyRenderer",
    "Buffer",
    "BufferKind",
    "Highlighter",
    "JsonFormatter",
    "Printer",
    "StreamDecoder",
]

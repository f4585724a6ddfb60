"""Shared test fixtures."""

import io
import re
from collections.abc import Callable, Iterable

import httpx
import pytest

from hxprint.services.buffer import Buffer, BufferKind

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

BufferFactory = Callable[..., tuple[Buffer, io.BytesIO]]


@pytest.fixture
def make_buffer() -> BufferFactory:
    """Build an in-memory buffer of a given kind."""

    def _make(kind: BufferKind = BufferKind.STDOUT) -> tuple[Buffer, io.BytesIO]:
        stream = io.BytesIO()
        return Buffer(kind, stream), stream

    return _make


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove terminal color sequences from output."""

    def _strip(text: str) -> str:
        return ANSI_ESCAPE.sub("", text)

    return _strip


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Build a response whose body is delivered in the given chunks."""

    def _make(
        chunks: Iterable[bytes],
        content_type: str | None = None,
        status_code: int = 200,
    ) -> httpx.Response:
        headers = {"Content-Type": content_type} if content_type else {}
        return httpx.Response(status_code, headers=headers, content=iter(list(chunks)))

    return _make

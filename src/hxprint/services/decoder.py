"""Charset-aware lossy decoding of response bodies.

Buffered bodies are decoded in one go with :func:`decode_lossy`, streamed
bodies chunk by chunk with :class:`StreamDecoder`. Both resolve the
encoding the same way and replace invalid sequences with U+FFFD, so the
concatenated stream output always equals the buffered result.
"""

import codecs
from collections.abc import Iterable, Iterator

DEFAULT_ENCODING = "utf-8"

# Checked longest first; a BOM overrides the declared charset
_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)
_MAX_BOM_LEN = max(len(bom) for bom, _ in _BOMS)


def resolve_encoding(label: str | None) -> str:
    """Map a charset label to a codec name, falling back to UTF-8."""
    if not label:
        return DEFAULT_ENCODING
    try:
        info = codecs.lookup(label.strip())
    except LookupError:
        return DEFAULT_ENCODING
    # Rejects bytes-to-bytes codecs such as base64 or zlib
    if not getattr(info, "_is_text_encoding", True):
        return DEFAULT_ENCODING
    return info.name


def sniff_bom(data: bytes) -> tuple[str, int] | None:
    """Detect a byte-order mark at the start of ``data``.

    Returns:
        The encoding and BOM length, or None if there is no BOM
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None


def decode_lossy(data: bytes, label: str | None = None) -> str:
    """Decode a complete body, replacing invalid sequences."""
    encoding = resolve_encoding(label)
    sniffed = sniff_bom(data)
    if sniffed is not None:
        encoding, skip = sniffed
        data = data[skip:]
    return data.decode(encoding, errors="replace")


class StreamDecoder:
    """Re-encode a byte stream in any charset as UTF-8, incrementally.

    Multi-byte sequences split across chunk boundaries are reassembled by
    the incremental decoder; only the first few bytes are held back, to
    look for a byte-order mark.
    """

    def __init__(self, chunks: Iterable[bytes], label: str | None = None):
        self._chunks = chunks
        self.encoding = resolve_encoding(label)

    def __iter__(self) -> Iterator[bytes]:
        chunks = iter(self._chunks)
        head = b""
        for chunk in chunks:
            head += chunk
            if len(head) >= _MAX_BOM_LEN:
                break

        encoding = self.encoding
        sniffed = sniff_bom(head)
        if sniffed is not None:
            encoding, skip = sniffed
            head = head[skip:]

        decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        if head:
            text = decoder.decode(head)
            if text:
                yield text.encode("utf-8")
        for chunk in chunks:
            text = decoder.decode(chunk)
            if text:
                yield text.encode("utf-8")

        text = decoder.decode(b"", final=True)
        if text:
            yield text.encode("utf-8")

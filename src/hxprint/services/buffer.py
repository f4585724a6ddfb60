"""Output sink selection."""

import sys
from enum import Enum
from pathlib import Path
from typing import BinaryIO


class BufferKind(str, Enum):
    """Where the output ends up."""

    STDOUT = "stdout"
    STDERR = "stderr"
    FILE = "file"
    REDIRECT = "redirect"


class Buffer:
    """Byte-oriented output sink shared by a single printer."""

    def __init__(self, kind: BufferKind, stream: BinaryIO, path: Path | None = None):
        self.kind = kind
        self.path = path
        self._stream = stream
        self._owns_stream = False

    @classmethod
    def new(cls, download: bool, output: Path | None, is_stdout_tty: bool) -> "Buffer":
        """Select the sink for a CLI invocation.

        Args:
            download: Whether the body is being saved to a file
            output: Value of --output, if any
            is_stdout_tty: Whether stdout is attached to a terminal

        Returns:
            The sink to print to
        """
        if download:
            return cls(BufferKind.STDERR, sys.stderr.buffer)
        if output is not None:
            buffer = cls(BufferKind.FILE, open(output, "wb"), path=output)
            buffer._owns_stream = True
            return buffer
        if is_stdout_tty:
            return cls(BufferKind.STDOUT, sys.stdout.buffer)
        return cls(BufferKind.REDIRECT, sys.stdout.buffer)

    def is_terminal(self) -> bool:
        """Whether output is shown to a user rather than captured."""
        return self.kind in (BufferKind.STDOUT, BufferKind.STDERR)

    def print(self, text: str) -> None:
        """Write text, encoded as UTF-8."""
        self._stream.write(text.encode("utf-8"))

    def write(self, data: bytes) -> None:
        """Write raw bytes."""
        self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        """Flush, and close the underlying file if this sink opened it."""
        self.flush()
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> "Buffer":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

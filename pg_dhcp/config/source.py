"""
Buffered byte source with single-byte pushback.

The lexer classifies input one raw byte at a time and occasionally needs to
give a byte back (the first digit of a numeric literal, the terminator of an
identifier). ByteReader keeps that lookahead itself instead of relying on
peek/seek support of the wrapped stream.
"""

from typing import BinaryIO

from ..const import DEFAULT_CHUNK_SIZE


class ByteReader:
    """
    Reads single bytes from a binary stream.

    The stream is read in chunks and is never closed by the reader; the
    caller that opened it stays responsible for it.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        self._chunk = b""
        self._pos = 0
        self._last: int | None = None
        self._pushed = False
        self._eof = False

    def _fill(self) -> bool:
        """Load the next chunk. Returns False once the stream is exhausted."""
        if self._eof:
            return False
        data = self.stream.read(self.chunk_size)
        if not data:
            self._eof = True
            return False
        self._chunk = bytes(data)
        self._pos = 0
        return True

    def read_byte(self) -> int | None:
        """Return the next byte value, or None at end of input."""
        if self._pushed:
            self._pushed = False
            return self._last

        if self._pos >= len(self._chunk) and not self._fill():
            self._last = None
            return None

        b = self._chunk[self._pos]
        self._pos += 1
        self._last = b
        return b

    def unread_byte(self) -> None:
        """
        Push back the byte returned by the last read_byte() call.

        Raises:
            ValueError: If nothing can be pushed back (no byte read yet,
                last read hit end of input, or a byte is already pushed back)
        """
        if self._pushed:
            raise ValueError("unread_byte called twice without an intervening read")
        if self._last is None:
            raise ValueError("no byte to unread")
        self._pushed = True

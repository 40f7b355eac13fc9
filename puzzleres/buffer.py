"""Growable byte buffer with a write position."""

from .errors import PuzzleError


class Buffer:
    """Byte buffer that grows as data is written at the current position."""

    def __init__(self, size=0, allocated=1024):
        if size < 0 or allocated < 0:
            raise PuzzleError("Error allocating memory for Buffer")
        self._data = bytearray(size)
        self._pos = 0

    def __len__(self):
        return len(self._data)

    def goto(self, offset):
        """Move the write position to an offset from the buffer start."""
        if offset < 0:
            raise ValueError(f"negative buffer offset {offset}")
        self._pos = offset

    def _ensure(self, end):
        if len(self._data) < end:
            self._data.extend(bytes(end - len(self._data)))

    def put_data(self, data):
        """Write bytes at the current position and advance past them."""
        chunk = bytes(data)
        end = self._pos + len(chunk)
        self._ensure(end)
        self._data[self._pos:end] = chunk
        self._pos = end
        return len(chunk)

    def put_integer(self, value):
        """Write a 32-bit little-endian integer."""
        return self.put_data((value & 0xFFFFFFFF).to_bytes(4, "little"))

    def put_utf8(self, text):
        """Write a string as its UTF-8 length followed by its UTF-8 bytes."""
        encoded = text.encode("utf-8")
        self.put_integer(len(encoded))
        self.put_data(encoded)
        return 4 + len(encoded)

    def put_byte(self, value):
        """Write a single byte."""
        return self.put_data(bytes((value & 0xFF,)))

    def getvalue(self):
        """Return the whole buffer content."""
        return bytes(self._data)
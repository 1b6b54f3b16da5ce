"""Bounded big-endian byte cursors.

Every read and write is checked on its own: the first one that does not fit
raises, so a decode stops at the field that failed instead of carrying an
error flag to the end.
"""

import struct

from vpcbox.errors import SinkFullError, TruncatedInputError

_FORMATS = {1: ">B", 2: ">H", 4: ">I", 8: ">Q"}


def _pack_uint(value: int, width: int) -> bytes:
    if not 0 <= value < 1 << (8 * width):
        raise ValueError(f"{value} does not fit in {width * 8} bits")
    if width == 3:
        return struct.pack(">I", value)[1:]
    return struct.pack(_FORMATS[width], value)


class SliceReader:
    """Sequential reader over an in-memory buffer.

    Args:
        data: Buffer to read from
        length: Optional bound; reads never go past ``min(length, len(data))``
    """

    def __init__(self, data: bytes, length: int | None = None) -> None:
        view = memoryview(data)
        if length is not None:
            view = view[: max(length, 0)]
        self._data = view
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError(f"negative read length: {n}")
        if n > self.remaining:
            raise TruncatedInputError(needed=n, available=self.remaining, offset=self._pos)
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def read_uint8(self) -> int:
        return self._take(1)[0]

    def read_uint16(self) -> int:
        return struct.unpack(">H", self._take(2))[0]

    def read_uint24(self) -> int:
        return int.from_bytes(self._take(3), "big")

    def read_uint32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def read_uint64(self) -> int:
        return struct.unpack(">Q", self._take(8))[0]

    def read_bytes(self, n: int) -> bytes:
        """Read ``n`` bytes as an independent copy."""
        return bytes(self._take(n))

    def skip(self, n: int) -> None:
        self._take(n)


class SliceWriter:
    """Sequential writer into a growable or fixed-size buffer.

    Args:
        size: Capacity in bytes; ``None`` means unbounded
    """

    def __init__(self, size: int | None = None) -> None:
        self._buf = bytearray()
        self._size = size

    def __len__(self) -> int:
        return len(self._buf)

    def _put(self, chunk: bytes) -> None:
        if self._size is not None and len(self._buf) + len(chunk) > self._size:
            raise SinkFullError(needed=len(chunk), available=self._size - len(self._buf))
        self._buf += chunk

    def write_uint8(self, value: int) -> None:
        self._put(_pack_uint(value, 1))

    def write_uint16(self, value: int) -> None:
        self._put(_pack_uint(value, 2))

    def write_uint24(self, value: int) -> None:
        self._put(_pack_uint(value, 3))

    def write_uint32(self, value: int) -> None:
        self._put(_pack_uint(value, 4))

    def write_uint64(self, value: int) -> None:
        self._put(_pack_uint(value, 8))

    def write_bytes(self, data: bytes) -> None:
        self._put(bytes(data))

    def getvalue(self) -> bytes:
        return bytes(self._buf)

"""A byte buffer with a read/write cursor that works at bit granularity."""

from __future__ import annotations

from collections.abc import Iterable


class BitStream:
    """A byte buffer with a cursor that can address individual bits.

    Bits are written and read least significant first within each byte.
    Not thread-safe.
    """

    __slots__ = ("_buffer", "_index", "_bitindex")

    def __init__(self, buffer: bytes | bytearray | Iterable[int] = b"") -> None:
        self._buffer = bytearray(buffer)
        self._index = 0
        self._bitindex = 0

    @property
    def at_end(self) -> bool:
        """True once the cursor has moved past the last byte."""
        return self._index >= len(self._buffer)

    @property
    def index(self) -> int:
        """Index of the current byte."""
        return self._index

    @property
    def bitindex(self) -> int:
        """Index of the current bit within the current byte."""
        return self._bitindex

    @property
    def buffer(self) -> bytes:
        """A copy of the stream's contents."""
        return bytes(self._buffer)

    def put(self, byte: int) -> None:
        """Write a byte at the cursor, growing the buffer as needed."""
        if self._bitindex != 0:
            self.put_bits(byte, 8)
            return
        if self._index < len(self._buffer):
            self._buffer[self._index] = byte & 0xFF
        else:
            self._buffer.append(byte & 0xFF)
        self._index += 1

    def put_fast(self, byte: int) -> None:
        """Overwrite an existing byte at a byte-aligned cursor."""
        if self._bitindex != 0:
            raise ValueError("put_fast requires a byte-aligned cursor")
        if self._index >= len(self._buffer):
            raise IndexError("put_fast cannot grow the buffer")
        self._buffer[self._index] = byte & 0xFF
        self._index += 1

    def _put_bit(self, bit: bool) -> None:
        mask = 1 << self._bitindex
        if self._index >= len(self._buffer):
            if self._bitindex != 0:
                raise ValueError("cursor points inside a byte that does not exist")
            self._buffer.append(mask if bit else 0)
        else:
            value = self._buffer[self._index] & ~mask
            if bit:
                value |= mask
            self._buffer[self._index] = value
        self._bitindex += 1
        if self._bitindex >= 8:
            self._bitindex = 0
            self._index += 1

    def put_bits(self, value: int, width: int) -> None:
        """Write the lowest ``width`` bits of ``value``, least significant first."""
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        for shift in range(width):
            self._put_bit(bool((value >> shift) & 1))

    def put_bitset(self, bits: Iterable[bool | int]) -> None:
        """Write each bit of a bitset in its iteration order."""
        for bit in bits:
            self._put_bit(bool(bit))

    def _bits_left(self, index: int, bitindex: int) -> int:
        return max(0, (len(self._buffer) - index) * 8 - bitindex)

    def _gather(self, width: int) -> tuple[int, int, int]:
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        if self._bits_left(self._index, self._bitindex) < width:
            raise EOFError(f"cannot read {width} bits past the end of the stream")
        index, bitindex, result = self._index, self._bitindex, 0
        for position in range(width):
            if self._buffer[index] & (1 << bitindex):
                result |= 1 << position
            bitindex += 1
            if bitindex > 7:
                bitindex = 0
                index += 1
        return result, index, bitindex

    def read_bits(self, width: int) -> int:
        """Read ``width`` bits as an integer and advance the cursor."""
        result, self._index, self._bitindex = self._gather(width)
        return result

    def peek_bits(self, width: int) -> int:
        """Read ``width`` bits as an integer without moving the cursor."""
        return self._gather(width)[0]

    def read(self) -> int:
        """Read one byte and advance the cursor."""
        if self._bitindex != 0:
            return self.read_bits(8)
        if self._index >= len(self._buffer):
            raise EOFError("cannot read past the end of the stream")
        byte = self._buffer[self._index]
        self._index += 1
        return byte

    def peek(self) -> int:
        """Read one byte without moving the cursor."""
        if self._bitindex != 0:
            return self.peek_bits(8)
        if self._index >= len(self._buffer):
            raise EOFError("cannot read past the end of the stream")
        return self._buffer[self._index]

    def seek(self, index: int, bitindex: int = 0) -> None:
        """Move the cursor; ``index`` may equal the buffer length."""
        if not 0 <= index <= len(self._buffer):
            raise ValueError(f"index {index} outside 0..{len(self._buffer)}")
        if not 0 <= bitindex < 8:
            raise ValueError(f"bitindex {bitindex} outside 0..7")
        self._index = index
        self._bitindex = bitindex
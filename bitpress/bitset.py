"""A growable sequence of bits, most significant bit first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class DynamicBitset:
    """An ordered, growable collection of bits.

    Bits are kept in insertion order. ``to_uint`` reads that order as a
    binary number, so the first bit added is the most significant one.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[bool | int] = ()) -> None:
        self._bits: list[bool] = [bool(bit) for bit in bits]

    @classmethod
    def from_int(cls, value: int, width: int) -> DynamicBitset:
        """Build a bitset holding the lowest ``width`` bits of ``value``."""
        bitset = cls()
        bitset.add_int(value, width)
        return bitset

    def add(self, other: Iterable[bool | int]) -> None:
        """Append every bit of another bitset (or iterable of bits)."""
        self._bits.extend(bool(bit) for bit in other)

    def add_int(self, value: int, width: int) -> None:
        """Append the lowest ``width`` bits of ``value``, most significant first."""
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        self._bits.extend(bool((value >> shift) & 1) for shift in reversed(range(width)))

    def append(self, bit: bool | int) -> None:
        """Append a single bit."""
        self._bits.append(bool(bit))

    def _fold(self, start: int) -> int:
        value = start
        for bit in self._bits:
            value = (value << 1) | bit
        return value

    def to_uint(self) -> int:
        """Return the bits read as an unsigned binary number."""
        return self._fold(0)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicBitset):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        # A leading 1 keeps "10" and "010" apart.
        return hash(self._fold(1))

    def __repr__(self) -> str:
        return f"DynamicBitset('{''.join('1' if bit else '0' for bit in self._bits)}')"
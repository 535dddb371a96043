"""A codec that gives the most frequent byte values the shortest bit patterns."""

from __future__ import annotations

from collections import Counter

from bitpress.codec import Codec, DecompressionError
from bitpress.stream import BitStream

Symbol = tuple[int, int]


class SimpleCodec(Codec):
    """Encodes bytes as short or long fixed-width symbols ranked by frequency.

    The ``short_symbols()`` most frequent bytes get ``short_symbol_bits``-bit
    symbols; the rest get ``long_symbol_bits``-bit symbols whose low
    ``short_symbol_bits`` bits are all set.

    Layout: 3 bits holding the bit index at which the data ends, 9 bits
    holding the alphabet size, the alphabet bytes from most to least
    frequent, then the symbols.
    """

    def __init__(self, short_symbol_bits: int = 6, long_symbol_bits: int = 14) -> None:
        if short_symbol_bits < 1:
            raise ValueError(f"short_symbol_bits must be positive, got {short_symbol_bits}")
        if long_symbol_bits <= short_symbol_bits:
            raise ValueError("long_symbol_bits must exceed short_symbol_bits")
        self.short_symbol_bits = short_symbol_bits
        self.long_symbol_bits = long_symbol_bits
        if self.total_symbols() <= 255:
            raise ValueError("not enough symbols to cover all possible byte values")

    def __repr__(self) -> str:
        return f"SimpleCodec({self.short_symbol_bits}, {self.long_symbol_bits})"

    def short_symbols(self) -> int:
        """Number of byte values that get a short symbol."""
        return (1 << self.short_symbol_bits) - 1

    def long_symbols(self) -> int:
        """Number of long symbols available."""
        return 1 << (self.long_symbol_bits - self.short_symbol_bits)

    def total_symbols(self) -> int:
        """Number of symbols of either length."""
        return self.short_symbols() + self.long_symbols()

    def symbol(self, number: int) -> Symbol:
        """Return the ``(value, width)`` symbol for the byte ranked ``number``."""
        if number < self.short_symbols():
            return number, self.short_symbol_bits
        pattern = ((number - self.short_symbols() + 1) << self.short_symbol_bits) | self.short_symbols()
        return pattern, self.long_symbol_bits

    def compress(self, source: BitStream, sink: BitStream) -> None:
        data = bytearray()
        while not source.at_end:
            data.append(source.read())

        order = [byte for byte, _ in Counter(data).most_common()]
        table = {byte: self.symbol(rank) for rank, byte in enumerate(order)}

        sink.put_bits(0, 3)
        sink.put_bits(len(order), 9)
        for byte in order:
            sink.put(byte)

        for byte in data:
            sink.put_bits(*table[byte])

        final_bitindex = sink.bitindex
        sink.seek(0)
        sink.put_bits(final_bitindex, 3)

    def decompress(self, source: BitStream, sink: BitStream) -> None:
        size = len(source.buffer)
        if source.at_end or size < 2:
            raise DecompressionError("input too short to hold a header")

        try:
            final_bitindex = source.read_bits(3)
            alphabet_size = source.read_bits(9)
            if size < source.index + alphabet_size + 1:
                raise DecompressionError("input too short to hold the alphabet")

            table = {self.symbol(rank): source.read() for rank in range(alphabet_size)}

            while not source.at_end:
                if final_bitindex and source.index >= size - 1 and source.bitindex >= final_bitindex:
                    break
                symbol = self._read_symbol(source)
                try:
                    sink.put(table[symbol])
                except KeyError:
                    raise DecompressionError(f"unknown symbol {symbol[0]:#x}") from None
        except EOFError as exc:
            raise DecompressionError("compressed data ends unexpectedly") from exc

    def _read_symbol(self, source: BitStream) -> Symbol:
        mask = self.short_symbols()
        if source.peek_bits(self.short_symbol_bits) & mask != mask:
            return source.read_bits(self.short_symbol_bits), self.short_symbol_bits
        return source.read_bits(self.long_symbol_bits), self.long_symbol_bits
"""A codec that builds a Huffman code from the input's byte frequencies."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count

from bitpress.bitset import DynamicBitset
from bitpress.codec import Codec, DecompressionError
from bitpress.stream import BitStream

_MAX_CODE_LENGTH = 256


@dataclass(frozen=True)
class _Node:
    value: int = 0
    first: _Node | None = None
    second: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.first is None


def _build_tree(frequencies: Counter[int]) -> _Node | None:
    tiebreak = count()
    heap = [(freq, next(tiebreak), _Node(byte)) for byte, freq in sorted(frequencies.items())]
    heapq.heapify(heap)
    while len(heap) > 1:
        first_freq, _, first = heapq.heappop(heap)
        second_freq, _, second = heapq.heappop(heap)
        heapq.heappush(heap, (first_freq + second_freq, next(tiebreak), _Node(0, first, second)))
    return heap[0][2] if heap else None


def _build_codes(root: _Node | None) -> dict[int, DynamicBitset]:
    # Every code starts with a 1 bit for the root, which keeps codes of
    # different lengths apart when read as integers.
    codes: dict[int, DynamicBitset] = {}
    if root is None:
        return codes
    pending: list[tuple[_Node, list[bool]]] = [(root, [True])]
    while pending:
        node, code = pending.pop()
        if node.is_leaf:
            codes[node.value] = DynamicBitset(code)
        else:
            pending.append((node.first, [*code, True]))
            pending.append((node.second, [*code, False]))
    return codes


class HuffmanCodec(Codec):
    """Huffman coding with the code table stored in the output.

    Layout: 3 bits holding the bit index at which the data ends, 9 bits
    holding the table size, then for each entry the byte (8 bits), the code
    length (9 bits) and the code, followed by the encoded data.
    """

    def compress(self, source: BitStream, sink: BitStream) -> None:
        data = bytearray()
        while not source.at_end:
            data.append(source.read())

        codes = _build_codes(_build_tree(Counter(data)))

        sink.put_bits(0, 3)
        sink.put_bits(len(codes), 9)
        for byte, code in sorted(codes.items()):
            sink.put_bits(byte, 8)
            sink.put_bits(len(code), 9)
            sink.put_bitset(code)

        for byte in data:
            sink.put_bitset(codes[byte])

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

            table: dict[int, int] = {}
            for _ in range(alphabet_size):
                byte = source.read()
                length = source.read_bits(9)
                code = DynamicBitset(source.read_bits(1) for _ in range(length))
                table[code.to_uint()] = byte

            while not source.at_end:
                if final_bitindex and source.index >= size - 1 and source.bitindex >= final_bitindex:
                    break
                code = self._read_code(source, table)
                try:
                    sink.put(table[code.to_uint()])
                except KeyError:
                    raise DecompressionError(f"unknown code {code!r}") from None
        except EOFError as exc:
            raise DecompressionError("compressed data ends unexpectedly") from exc

    @staticmethod
    def _read_code(source: BitStream, table: dict[int, int]) -> DynamicBitset:
        code = DynamicBitset()
        while code.to_uint() not in table and not source.at_end:
            code.append(source.read_bits(1))
            if len(code) > _MAX_CODE_LENGTH:
                raise DecompressionError("code longer than any valid code")
        return code

    def __repr__(self) -> str:
        return "HuffmanCodec()"
"""The codec interface and helpers that run a codec over whole buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bitpress.stream import BitStream


class DecompressionError(ValueError):
    """Raised when compressed data cannot be decoded."""


class Codec(ABC):
    """A compression algorithm that moves data from one stream to another."""

    @abstractmethod
    def compress(self, source: BitStream, sink: BitStream) -> None:
        """Read all of ``source`` and write its compressed form to ``sink``."""

    @abstractmethod
    def decompress(self, source: BitStream, sink: BitStream) -> None:
        """Read compressed data from ``source`` and write the original to ``sink``.

        Raises DecompressionError if the data cannot be decoded.
        """


def compress(codec: Codec, data: bytes | bytearray) -> bytes:
    """Compress ``data`` with ``codec`` and return the result."""
    sink = BitStream()
    codec.compress(BitStream(data), sink)
    return sink.buffer


def decompress(codec: Codec, data: bytes | bytearray) -> bytes:
    """Decompress ``data`` with ``codec`` and return the result."""
    sink = BitStream()
    codec.decompress(BitStream(data), sink)
    return sink.buffer
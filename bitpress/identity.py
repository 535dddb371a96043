"""A codec that copies its input unchanged."""

from __future__ import annotations

from bitpress.codec import Codec
from bitpress.stream import BitStream


class IdentityCodec(Codec):
    """Copies the input to the output in both directions."""

    def compress(self, source: BitStream, sink: BitStream) -> None:
        while not source.at_end:
            sink.put(source.read())

    def decompress(self, source: BitStream, sink: BitStream) -> None:
        self.compress(source, sink)

    def __repr__(self) -> str:
        return "IdentityCodec()"
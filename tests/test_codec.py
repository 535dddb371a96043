import pytest

from bitpress.codec import Codec, DecompressionError, compress, decompress
from bitpress.stream import BitStream


class _Reverse(Codec):
    def compress(self, source: BitStream, sink: BitStream) -> None:
        data = bytearray()
        while not source.at_end:
            data.append(source.read())
        for byte in reversed(data):
            sink.put(byte)

    def decompress(self, source: BitStream, sink: BitStream) -> None:
        self.compress(source, sink)


class _Failing(Codec):
    def compress(self, source: BitStream, sink: BitStream) -> None:
        sink.put(source.read())

    def decompress(self, source: BitStream, sink: BitStream) -> None:
        raise DecompressionError("cannot decode")


def test_compress_returns_sink_contents():
    assert compress(_Reverse(), b"abc") == b"cba"


def test_decompress_returns_sink_contents():
    assert decompress(_Reverse(), b"abc") == b"cba"


def test_round_trip():
    data = b"Hello world!"
    assert decompress(_Reverse(), compress(_Reverse(), data)) == data


def test_accepts_bytearray():
    assert compress(_Reverse(), bytearray(b"xy")) == b"yx"


def test_empty_input():
    assert compress(_Reverse(), b"") == b""


def test_decompression_error_propagates():
    with pytest.raises(DecompressionError, match="cannot decode"):
        decompress(_Failing(), b"abc")


def test_decompression_error_is_value_error():
    with pytest.raises(ValueError):
        decompress(_Failing(), b"abc")


def test_codec_is_abstract():
    with pytest.raises(TypeError):
        Codec()
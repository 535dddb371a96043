import pytest

from bitpress.codec import DecompressionError, compress, decompress
from bitpress.huffman import HuffmanCodec
from bitpress.stream import BitStream


def _round_trip(data):
    codec = HuffmanCodec()
    return decompress(codec, compress(codec, data))


def test_compress_decompress_text():
    data = b"Hello world!"
    assert _round_trip(data) == data


def test_compress_decompress_text2():
    data = (
        b"Hello world! This is a long test string that is being compressed "
        b"and then decompressed by the algorithm..."
    )
    assert _round_trip(data) == data


def test_compress_decompress_text3():
    data = b"The quick brown fox jumps over the lazy dog"
    assert _round_trip(data) == data


def test_compress_decompress_full_range():
    data = bytes(range(256))
    assert _round_trip(data) == data


def test_compress_decompress_empty_range():
    assert _round_trip(b"") == b""


def test_single_repeated_byte():
    data = b"a" * 17
    assert _round_trip(data) == data


def test_skewed_frequencies():
    data = bytes(n for n in range(20) for _ in range(1 << (n % 10)))
    assert _round_trip(data) == data


def test_single_byte_table_entry():
    stream = BitStream(compress(HuffmanCodec(), b"aaaa"))
    stream.read_bits(3)
    assert stream.read_bits(9) == 1
    assert stream.read_bits(8) == ord("a")
    assert stream.read_bits(9) == 1
    assert stream.read_bits(1) == 1


def test_table_size_matches_distinct_bytes():
    data = b"The quick brown fox jumps over the lazy dog"
    stream = BitStream(compress(HuffmanCodec(), data))
    stream.read_bits(3)
    assert stream.read_bits(9) == len(set(data))


def test_repetitive_input_shrinks():
    data = b"abababababaaaaaaab" * 50
    assert len(compress(HuffmanCodec(), data)) < len(data)


def test_final_bitindex_and_payload():
    # 3 + 9 + 8 + 9 + 1 header bits and four 1-bit codes: 34 bits in 5 bytes.
    compressed = compress(HuffmanCodec(), b"aaaa")
    assert len(compressed) == 5
    stream = BitStream(compressed)
    assert stream.read_bits(3) == 2
    stream.read_bits(9 + 8 + 9 + 1)
    assert stream.read_bits(4) == 0b1111


@pytest.mark.parametrize("data", [b"", b"\x00"])
def test_decompress_rejects_short_input(data):
    with pytest.raises(DecompressionError):
        decompress(HuffmanCodec(), data)


def test_decompress_rejects_truncated_table():
    header = BitStream()
    header.put_bits(0, 3)
    header.put_bits(5, 9)
    with pytest.raises(DecompressionError):
        decompress(HuffmanCodec(), header.buffer)
import pytest

from bitpress.codec import DecompressionError, compress, decompress
from bitpress.simple import SimpleCodec
from bitpress.stream import BitStream


def _round_trip(codec, data):
    return decompress(codec, compress(codec, data))


@pytest.mark.parametrize("short_bits,long_bits", [(7, 15), (6, 14), (5, 13), (4, 12), (3, 11), (2, 10)])
def test_compress_decompress_text_symbol_sizes(short_bits, long_bits):
    data = b"Hello world!"
    assert _round_trip(SimpleCodec(short_bits, long_bits), data) == data


def test_compress_decompress_text2():
    data = (
        b"Hello world! This is a long test string that is being compressed "
        b"and then decompressed by the algorithm..."
    )
    assert _round_trip(SimpleCodec(6, 14), data) == data


def test_compress_decompress_text3():
    data = b"The quick brown fox jumps over the lazy dog"
    assert _round_trip(SimpleCodec(6, 14), data) == data


def test_compress_decompress_full_range():
    data = bytes(range(256))
    assert _round_trip(SimpleCodec(5, 13), data) == data


def test_compress_decompress_empty_range():
    assert _round_trip(SimpleCodec(5, 13), b"") == b""


@pytest.mark.parametrize("short_bits,long_bits", [(2, 10), (7, 15)])
def test_full_range_every_size(short_bits, long_bits):
    data = bytes(range(256)) * 2
    assert _round_trip(SimpleCodec(short_bits, long_bits), data) == data


def test_default_sizes():
    codec = SimpleCodec()
    assert (codec.short_symbol_bits, codec.long_symbol_bits) == (6, 14)


def test_total_is_sum_of_short_and_long():
    codec = SimpleCodec(4, 12)
    assert codec.total_symbols() == codec.short_symbols() + codec.long_symbols()


@pytest.mark.parametrize("short_bits,long_bits", [(2, 10), (3, 11), (6, 14), (7, 15)])
def test_symbols_are_distinct_and_well_formed(short_bits, long_bits):
    codec = SimpleCodec(short_bits, long_bits)
    symbols = [codec.symbol(n) for n in range(256)]
    assert len(set(symbols)) == 256
    mask = codec.short_symbols()
    for number, (value, width) in enumerate(symbols):
        assert value < (1 << width)
        if number < codec.short_symbols():
            assert width == short_bits
            assert value & mask != mask
        else:
            assert width == long_bits
            assert value & mask == mask


@pytest.mark.parametrize("short_bits,long_bits", [(1, 8), (4, 8), (6, 6), (0, 10)])
def test_rejects_too_few_symbols(short_bits, long_bits):
    with pytest.raises(ValueError):
        SimpleCodec(short_bits, long_bits)


def test_header_holds_alphabet_in_frequency_order():
    compressed = compress(SimpleCodec(6, 14), b"abbbcc")
    stream = BitStream(compressed)
    stream.read_bits(3)
    assert stream.read_bits(9) == 3
    assert [stream.read(), stream.read(), stream.read()] == [ord("b"), ord("c"), ord("a")]


def test_repetitive_input_shrinks():
    data = b"a" * 1000
    assert len(compress(SimpleCodec(6, 14), data)) < len(data)


@pytest.mark.parametrize("data", [b"", b"\x00"])
def test_decompress_rejects_short_input(data):
    with pytest.raises(DecompressionError):
        decompress(SimpleCodec(), data)


def test_decompress_rejects_truncated_alphabet():
    header = BitStream()
    header.put_bits(0, 3)
    header.put_bits(256, 9)
    with pytest.raises(DecompressionError):
        decompress(SimpleCodec(), header.buffer)
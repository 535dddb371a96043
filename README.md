# bitpress

Compress and decompress byte streams with a few small codecs, from the
command line or from Python.

Available algorithms:

- `identity`: copies the input unchanged.
- `simple2` … `simple7`: ranks the bytes by frequency; the most frequent
  ones get short fixed-width symbols (2 to 7 bits), the rest get symbols
  8 bits longer whose low bits are all set.
- `huffman`: builds a Huffman code from the byte frequencies and stores
  the code table in the output.

## Installation

```
pip install .
```

## Command line

`bitpress` reads all of standard input, applies the chosen operation and
writes the result to standard output.

```
bitpress -a huffman -m compress < notes.txt > notes.bp
bitpress -a huffman -m decompress < notes.bp > notes.txt
```

Options:

- `-m compress|decompress`: the operation (default `compress`).
- `-a ALGORITHM`: one of the algorithms above (default `identity`).

An unknown argument, a missing option value, or an unknown mode or
algorithm prints an error message and exits with status 1. Input that
cannot be decompressed also prints an error and exits with status 1.

## Python

```python
from bitpress.codec import compress, decompress
from bitpress.huffman import HuffmanCodec
from bitpress.simple import SimpleCodec

data = b"Hello world!"

packed = compress(HuffmanCodec(), data)
assert decompress(HuffmanCodec(), packed) == data

simple6 = SimpleCodec(6, 14)
assert decompress(simple6, compress(simple6, data)) == data
```

`SimpleCodec(short_symbol_bits, long_symbol_bits)` raises `ValueError`
if the two widths cannot give every byte value a symbol.

Settings can also be parsed from an argument list (without the program
name):

```python
from bitpress.runsettings import RunSettings

settings = RunSettings.from_args(["-m", "compress", "-a", "simple5"])
output = settings.run(b"some bytes")
```

`RunSettings` holds a `Mode` and an `Algorithm`; `codec()` returns the
matching codec instance.

Decompressing malformed input raises `bitpress.codec.DecompressionError`;
invalid arguments raise `bitpress.runsettings.SettingsError`.

New codecs subclass `bitpress.codec.Codec` and implement
`compress(source, sink)` and `decompress(source, sink)` over two
`BitStream` objects.

## Bit-level building blocks

- `bitpress.stream.BitStream` is a byte buffer with a cursor that
  addresses single bits. It writes and reads bits least significant bit
  first within each byte (`put`, `put_bits`, `put_bitset`, `read`,
  `read_bits`, `peek`, `peek_bits`, `seek`). Reading past the end raises
  `EOFError`.
- `bitpress.bitset.DynamicBitset` is a growable sequence of bits;
  `to_uint()` reads them as a binary number with the first bit added as
  the most significant.

## Limitations

- The whole input is read into memory before it is processed.
- Compressed output does not record which algorithm made it: decompress
  with the same algorithm that was used to compress.

## Tests

```
pip install ".[test]"
pytest
```
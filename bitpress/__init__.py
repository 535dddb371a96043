"""Bit streams, byte compression codecs (identity, simple, Huffman) and a command-line filter."""

__version__ = "0.1.0"
"""Run settings: which algorithm to run and in which direction."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from bitpress.codec import Codec, compress, decompress
from bitpress.huffman import HuffmanCodec
from bitpress.identity import IdentityCodec
from bitpress.simple import SimpleCodec


class Mode(enum.Enum):
    """Direction in which the data is processed."""

    COMPRESS = "compress"
    DECOMPRESS = "decompress"


class Algorithm(enum.Enum):
    """The available compression algorithms."""

    IDENTITY = "identity"
    SIMPLE2 = "simple2"
    SIMPLE3 = "simple3"
    SIMPLE4 = "simple4"
    SIMPLE5 = "simple5"
    SIMPLE6 = "simple6"
    SIMPLE7 = "simple7"
    HUFFMAN = "huffman"


class SettingsError(ValueError):
    """Raised when command-line arguments cannot be parsed."""


_SIMPLE_SHORT_BITS = {
    Algorithm.SIMPLE2: 2,
    Algorithm.SIMPLE3: 3,
    Algorithm.SIMPLE4: 4,
    Algorithm.SIMPLE5: 5,
    Algorithm.SIMPLE6: 6,
    Algorithm.SIMPLE7: 7,
}


@dataclass(frozen=True)
class RunSettings:
    """Settings for one run: a mode and an algorithm."""

    mode: Mode = Mode.COMPRESS
    algorithm: Algorithm = Algorithm.IDENTITY

    @classmethod
    def from_args(cls, args: Iterable[str]) -> RunSettings:
        """Parse ``-m MODE`` and ``-a ALGORITHM`` options (program name excluded)."""
        mode = Mode.COMPRESS
        algorithm = Algorithm.IDENTITY
        remaining = iter(args)
        for arg in remaining:
            if arg == "-m":
                value = next(remaining, None)
                if value is None:
                    raise SettingsError("Please supply a mode with the '-m' option.")
                try:
                    mode = Mode(value)
                except ValueError:
                    raise SettingsError(
                        f'Invalid mode "{value}" specified for the \'-m\' option.'
                    ) from None
            elif arg == "-a":
                value = next(remaining, None)
                if value is None:
                    raise SettingsError("Please supply an algorithm with the '-a' option.")
                try:
                    algorithm = Algorithm(value)
                except ValueError:
                    raise SettingsError(
                        f'Invalid algorithm "{value}" specified for the \'-a\' option.'
                    ) from None
            else:
                raise SettingsError(f'Unexpected argument "{arg}".')
        return cls(mode=mode, algorithm=algorithm)

    def codec(self) -> Codec:
        """Return a codec instance for the chosen algorithm."""
        if self.algorithm is Algorithm.IDENTITY:
            return IdentityCodec()
        if self.algorithm is Algorithm.HUFFMAN:
            return HuffmanCodec()
        short_bits = _SIMPLE_SHORT_BITS[self.algorithm]
        return SimpleCodec(short_bits, short_bits + 8)

    def run(self, data: bytes | bytearray) -> bytes:
        """Compress or decompress ``data`` according to the settings."""
        if self.mode is Mode.DECOMPRESS:
            return decompress(self.codec(), data)
        return compress(self.codec(), data)
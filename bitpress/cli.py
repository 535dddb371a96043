"""Command-line entry point: filters standard input to standard output."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from bitpress.codec import DecompressionError
from bitpress.runsettings import RunSettings, SettingsError


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen algorithm over stdin and write the result to stdout."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = RunSettings.from_args(args)
    except SettingsError as exc:
        print(exc, file=sys.stderr)
        print("Could not parse arguments!", file=sys.stderr)
        return 1

    data = sys.stdin.buffer.read()
    try:
        output = settings.run(data)
    except DecompressionError as exc:
        print(f"Could not decompress input: {exc}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
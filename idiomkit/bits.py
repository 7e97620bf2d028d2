"""Fixed-width binary formatting and shifts on 16-bit unsigned values."""

from __future__ import annotations

import sys
from collections.abc import Sequence

SHORT_BITS = 16


def format_bits(value: int, width: int = SHORT_BITS) -> str:
    """Render the low ``width`` bits of ``value`` as a binary string."""
    if width < 0:
        raise ValueError("width must be non-negative")
    if width == 0:
        return ""
    return format(value & ((1 << width) - 1), f"0{width}b")


def shift_demo(value: int = 4) -> list[str]:
    """Show ``value``, ``value << 1``, ``value << 2`` and ``(value << 2) >> 3``.

    Every step is truncated to an unsigned 16-bit value.
    """
    mask = (1 << SHORT_BITS) - 1
    first = value & mask
    second = (first << 1) & mask
    third = (first << 2) & mask
    fourth = third >> 3
    return [format_bits(v, SHORT_BITS) for v in (first, second, third, fourth)]


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    value = int(args[0], 0) if args else 4
    for line in shift_demo(value):
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
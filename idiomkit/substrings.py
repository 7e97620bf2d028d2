"""Find segments that open and close with "ab"."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DEFAULT_TEXT = "abc34$abywzs6openxeabccabac"


def ab_segments(text: str) -> list[str]:
    """Return the segments starting and ending with "ab", scanned left to right.

    After a segment is found, scanning resumes one character past its end.
    """
    segments: list[str] = []
    i = 0
    while i < len(text):
        if text.startswith("ab", i):
            for j in range(i + 2, len(text) - 1):
                if text.startswith("ab", j):
                    segments.append(text[i:j + 2])
                    i = j + 2
                    break
        i += 1
    return segments


def longest_ab_segment(text: str) -> str:
    """Return the first longest segment, or an empty string if there is none."""
    longest = ""
    for segment in ab_segments(text):
        if len(segment) > len(longest):
            longest = segment
    return longest


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else DEFAULT_TEXT
    for segment in ab_segments(text):
        sys.stdout.write(segment + "\n")
    sys.stdout.write(longest_ab_segment(text) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
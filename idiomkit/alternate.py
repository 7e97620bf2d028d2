"""Two threads taking turns, and a byte-by-byte copy."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import Any


def interleave(letters: Sequence[Any], numbers: Sequence[Any]) -> list[Any]:
    """Emit letters and numbers alternately from two threads, letter first."""
    letters = list(letters)
    numbers = list(numbers)
    if len(letters) != len(numbers):
        raise ValueError("letters and numbers must have the same length")

    output: list[Any] = []
    condition = threading.Condition()
    state = {"printed": False, "ready": False}

    def emit_letters() -> None:
        with condition:
            for letter in letters:
                output.append(letter)
                state["ready"] = True
                state["printed"] = True
                condition.notify_all()
                condition.wait_for(lambda: not state["printed"])

    def emit_numbers() -> None:
        with condition:
            for number in numbers:
                condition.wait_for(lambda: state["ready"])
                output.append(number)
                state["ready"] = False
                state["printed"] = False
                condition.notify_all()

    threads = [threading.Thread(target=emit_letters), threading.Thread(target=emit_numbers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return output


def copy_bytes(dest: bytearray, src: bytes, num: int) -> bytearray:
    """Copy the first ``num`` bytes of ``src`` into ``dest`` and return ``dest``."""
    if dest is None or src is None:
        raise ValueError("dest and src must not be None")
    if num < 0:
        raise ValueError("num must be non-negative")
    if num > len(dest) or num > len(src):
        raise IndexError(f"cannot copy {num} bytes")
    dest[:num] = bytes(src[:num])
    return dest


def main(argv: Sequence[str] | None = None) -> int:
    result = interleave("ABCD", range(1, 5))
    sys.stdout.write("".join(str(item) for item in result) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""A growable vector of integers with explicit capacity management."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


class IntVector:
    """Integer sequence that tracks a capacity and grows it geometrically."""

    def __init__(self, n: int = 0, value: int = 0) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._data: list[int] = [value] * n
        self._capacity = n

    def capacity(self) -> int:
        """Number of elements the vector can hold before it has to grow."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"IntVector({self._data!r})"

    def reserve(self, n: int) -> None:
        """Grow the capacity to at least ``n``, at least doubling it."""
        if n <= self._capacity:
            return
        self._capacity = max(n, self._capacity * 2)

    def resize(self, n: int) -> None:
        """Shrink to ``n`` elements or pad with zeros up to ``n``."""
        if n < 0:
            raise ValueError("size must be non-negative")
        size = len(self._data)
        if n < size:
            del self._data[n:]
        elif n > size:
            self.reserve(n)
            self._data.extend([0] * (n - size))

    def push_back(self, value: int) -> None:
        if len(self._data) + 1 > self._capacity:
            self.reserve(len(self._data) + 1)
        self._data.append(value)

    def pop_back(self) -> None:
        """Remove the last element; does nothing on an empty vector."""
        if self._data:
            self._data.pop()

    def _check_position(self, index: int, *, allow_end: bool) -> None:
        limit = len(self._data) if allow_end else len(self._data) - 1
        if not 0 <= index <= limit:
            raise IndexError(f"position {index} out of range")

    def erase(self, index: int) -> int:
        """Remove the element at ``index`` and return that position."""
        self._check_position(index, allow_end=False)
        del self._data[index]
        return index

    def erase_range(self, first: int, last: int) -> int:
        """Remove the elements in ``[first, last)`` and return ``first``."""
        if not 0 <= first <= last <= len(self._data):
            raise IndexError(f"range [{first}, {last}) out of range")
        del self._data[first:last]
        return first

    def insert(self, index: int, value: int) -> int:
        """Insert ``value`` before ``index`` and return its position."""
        self._check_position(index, allow_end=True)
        self.reserve(len(self._data) + 1)
        self._data.insert(index, value)
        return index

    def insert_n(self, index: int, count: int, value: int) -> int:
        """Insert ``count`` copies of ``value`` before ``index``."""
        if count < 0:
            raise ValueError("count must be non-negative")
        self._check_position(index, allow_end=True)
        self.reserve(len(self._data) + count)
        self._data[index:index] = [value] * count
        return index

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._data.clear()


def main(argv: Sequence[str] | None = None) -> int:
    vec = IntVector()
    for value in (1, 2, 5, 7):
        vec.push_back(value)
    vec.erase(0)
    vec.pop_back()
    for value in vec:
        sys.stdout.write(f"{value}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
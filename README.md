# idiomkit

A small collection of self-contained examples. It has a growable integer
container, a thread pool, three singleton styles, a pair of threads
taking turns, and a few puzzle-style algorithms. Each module can be
used as a library. Each one also has a command that runs its demonstration.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Modules

| Module | What it provides |
| --- | --- |
| `idiomkit.vector` | `IntVector`, an integer container that keeps track of its capacity. It offers `reserve`, `resize`, `push_back`, `pop_back`, `erase`, `erase_range`, `insert`, `insert_n`, `clear` and `capacity`, plus `len()`, indexing and iteration. |
| `idiomkit.cards` | `process_cards` makes one stack pass over a row of cards and drops runs of three equal cards. `eliminate` repeats passes until a pass no longer changes the number of cards. |
| `idiomkit.substrings` | `ab_segments` finds the segments that start and end with `"ab"`. `longest_ab_segment` returns the first longest of them, or `""` if there are none. |
| `idiomkit.colortree` | `max_black_after_removal` takes a colour string of `R`/`B` and 1-based edges of a tree. `parse_input` reads the text format used on standard input. |
| `idiomkit.bits` | `format_bits` renders the low bits of an integer as a fixed-width bit string (16 by default). `shift_demo` shows `v`, `v << 1`, `v << 2` and `(v << 2) >> 3` as unsigned 16-bit values. |
| `idiomkit.threadpool` | `ThreadPool`, a fixed set of worker threads that drain a shared task queue. It has `enqueue` and `shutdown`, and it works as a context manager. |
| `idiomkit.singleton` | `EagerSingleton`, `LazyLogger` (with `print_log`) and `CheckedSingleton`. Each is reached through `get_instance()`. |
| `idiomkit.alternate` | `interleave` makes two threads emit letters and numbers in strict turns, letter first. `copy_bytes` copies the first `num` bytes from one buffer into another. |

## Library use

```python
from idiomkit.vector import IntVector
from idiomkit.bits import format_bits
from idiomkit.threadpool import ThreadPool

vec = IntVector()
for value in (1, 2, 5, 7):
    vec.push_back(value)
vec.erase(0)
vec.pop_back()
print(list(vec))            # [2, 5]

print(format_bits(4, 16))   # 0000000000000100

with ThreadPool(5) as pool:
    for i in range(10):
        pool.enqueue(print, i)
```

Errors are raised as exceptions:

- `IntVector.erase`, `erase_range`, `insert` and `insert_n` raise `IndexError` for positions out of range.
- `ThreadPool.enqueue` raises `RuntimeError` once the pool has been shut down.
- `max_black_after_removal` raises `ValueError` when the edges do not form a tree.
- `copy_bytes` raises `IndexError` when `num` is larger than either buffer.

When a task queued on a `ThreadPool` raises an exception, the pool logs it and the worker carries on.

## Commands

Each command runs the demonstration of one module:

    idiomkit-vector
    idiomkit-cards
    idiomkit-substrings [TEXT]
    idiomkit-colortree
    idiomkit-bits [VALUE]
    idiomkit-threadpool
    idiomkit-singleton
    idiomkit-alternate

`idiomkit-cards` reads a count from standard input, followed by that many cards. It prints the cards left after elimination, or `0` if none remain.

`idiomkit-colortree` reads the node count, the colour string and the edges from standard input, and prints the answer.

`idiomkit-substrings` prints every segment and then the longest one. It uses a built-in sample text when no text is given.

`idiomkit-bits` accepts a value in any base Python integer literals allow, such as `0x10`. The default value is 4.

## What it does not do

`IntVector` only keeps count of its capacity. It does not manage memory. Nothing is stored between runs, and the commands only print to standard output.
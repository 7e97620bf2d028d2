"""Card elimination: runs of three or more equal cards vanish."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def process_cards(cards: Iterable[str]) -> list[str]:
    """Make one stack pass over ``cards``, dropping runs of three equal cards."""
    stack: list[str] = []
    for card in cards:
        if len(stack) < 2 or card != stack[-1]:
            stack.append(card)
            continue
        top = stack.pop()
        if top == stack[-1]:
            while stack and stack[-1] == top:
                stack.pop()
        else:
            stack.append(top)
            stack.append(card)
    return stack


def eliminate(cards: Iterable[str]) -> list[str]:
    """Repeat passes until a pass no longer changes the number of cards."""
    current = list(cards)
    following = process_cards(current)
    while len(following) != len(current):
        current = following
        following = process_cards(current)
    return current


def main(argv: Sequence[str] | None = None) -> int:
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("missing card count")
    count = int(tokens[0])
    cards = tokens[1:1 + count]
    if len(cards) < count:
        raise ValueError(f"expected {count} cards, got {len(cards)}")
    remaining = eliminate(cards)
    sys.stdout.write((" ".join(remaining) if remaining else "0") + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Black-node counts in a red/black coloured tree after removing a red node."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def _adjacency(n: int, edges: Sequence[Edge]) -> list[list[int]]:
    if len(edges) != n - 1:
        raise ValueError(f"a tree of {n} nodes needs {n - 1} edges, got {len(edges)}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a missing node")
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    seen = {0}
    queue = deque([0])
    while queue:
        for child in adjacency[queue.popleft()]:
            if child not in seen:
                seen.add(child)
                queue.append(child)
    if len(seen) != n:
        raise ValueError("edges do not form a tree")
    return adjacency


def _subtree_black(colors: str, adjacency: list[list[int]]) -> list[int]:
    counts = [1 if c == "B" else 0 for c in colors]
    order: list[tuple[int, int]] = []
    stack = [(0, -1)]
    while stack:
        node, parent = stack.pop()
        order.append((node, parent))
        stack.extend((child, node) for child in adjacency[node] if child != parent)
    for node, parent in reversed(order):
        if parent >= 0:
            counts[parent] += counts[node]
    return counts


def max_black_after_removal(colors: str, edges: Iterable[Edge]) -> int:
    """Score each red node by walking the tree from it; return the best score.

    ``colors`` holds one of 'R' or 'B' per node; ``edges`` are 1-based pairs.
    """
    n = len(colors)
    if n == 0:
        raise ValueError("tree must have at least one node")
    edge_list = [(int(u), int(v)) for u, v in edges]
    adjacency = _adjacency(n, edge_list)
    counts = _subtree_black(colors, adjacency)
    total = colors.count("B")
    best = [0] * n
    reds = [node for node, color in enumerate(colors) if color == "R"]
    for start in reds:
        stack = [(start, -1, total)]
        while stack:
            node, parent, remaining = stack.pop()
            bonus = counts[node] - 1 if colors[node] == "B" else 0
            for child in adjacency[node]:
                if child == parent:
                    continue
                left = remaining - (counts[child] if colors[child] == "B" else 0)
                best[node] = max(best[node], left + bonus)
                stack.append((child, node, left))
    return max((best[node] for node in reds), default=0)


def parse_input(text: str) -> tuple[str, list[Edge]]:
    """Parse a node count, a colour string and ``n - 1`` edge pairs."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected a node count and a colour string")
    n = int(tokens[0])
    if n < 1:
        raise ValueError("node count must be positive")
    colors = tokens[1]
    if len(colors) < n:
        raise ValueError(f"colour string shorter than {n}")
    numbers = tokens[2:2 + 2 * (n - 1)]
    if len(numbers) < 2 * (n - 1):
        raise ValueError(f"expected {n - 1} edges")
    values = [int(x) for x in numbers]
    edges = list(zip(values[::2], values[1::2]))
    return colors[:n], edges


def main(argv: Sequence[str] | None = None) -> int:
    colors, edges = parse_input(sys.stdin.read())
    sys.stdout.write(f"{max_black_after_removal(colors, edges)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
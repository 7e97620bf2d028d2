"""Worked examples of containers, concurrency patterns and small puzzle algorithms."""

__version__ = "0.1.0"

__all__ = [
    "alternate",
    "bits",
    "cards",
    "colortree",
    "singleton",
    "substrings",
    "threadpool",
    "vector",
]
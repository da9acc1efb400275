"""Classic algorithms and data structures: graphs, trees, linked lists, range queries and puzzles."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "arrays",
    "graphs",
    "linked_lists",
    "puzzles",
    "structures",
    "text",
    "trees",
]
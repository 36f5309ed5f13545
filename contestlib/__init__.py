"""Classic algorithms and data structures: sorting, queues, trees, hashing, graphs and flows."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "cli",
    "flows",
    "graphs",
    "hashing",
    "queues",
    "sequences",
    "shortest_paths",
    "sorting",
    "sparse_table",
]
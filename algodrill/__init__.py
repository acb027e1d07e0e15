"""Classic algorithms and data structures: linked lists, an LRU cache, array
and matrix search, sorting, dynamic programming, word ladders, enumeration
and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "dynamic",
    "linked",
    "lru",
    "search",
    "sorting",
    "strings",
    "trees",
    "wordladder",
]
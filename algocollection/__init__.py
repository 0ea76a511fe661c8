"""Classic algorithms over lists, strings, linked lists, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "frequency",
    "graph",
    "linked_list",
    "searching",
    "sequences",
    "stacks",
    "strings",
    "sums",
    "tree",
]
"""Classic algorithms and data-structure routines in plain Python, with two small commands."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "checksum",
    "graphs",
    "linked_list",
    "matrix",
    "number_theory",
    "patterns",
    "searching",
    "sorting",
    "stack_sort",
    "text",
    "trees",
]
"""Solutions to classic algorithm problems on lists, trees, strings, grids, arrays and graphs."""

__version__ = "0.1.0"

__all__ = [
    "nodes",
    "linked_lists",
    "trees",
    "arithmetic",
    "strings",
    "grids",
    "arrays",
    "graphs",
]
"""Classic algorithm drills: dynamic programming, arithmetic, patterns, arrays, sorting and linked lists."""

__version__ = "0.1.0"
__all__ = ["dynamic", "numbers", "patterns", "arrays", "sorting", "linked_list"]
"""Two-stack integer sorting with a restricted set of operations, plus C-style helpers."""

__version__ = "0.1.0"